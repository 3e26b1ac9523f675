from linkhelper.cli import main

main()
