from proximity.cli import main

main()
