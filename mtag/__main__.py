from mtag.cli.app import main

main()
