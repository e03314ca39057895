from opbuild.cli.main import main

main()
