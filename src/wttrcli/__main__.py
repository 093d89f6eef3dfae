from wttrcli.cli import main

main()
