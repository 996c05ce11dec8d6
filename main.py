from jarfetch.cli import main as cli_main


if __name__ == "__main__":
    cli_main()
