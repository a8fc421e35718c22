from .interpreter import main

main()
