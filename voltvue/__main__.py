from voltvue.cli import main

main()
