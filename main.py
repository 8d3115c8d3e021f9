from cliargs.applications.cli import main

if __name__ == "__main__":
    main()
