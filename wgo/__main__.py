from wgo.cli import main

main()
