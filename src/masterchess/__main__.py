from masterchess.app import main

main()
