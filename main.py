"""Entry point for the Solara menu shell."""

from runtime.app import ShellApp


def main() -> None:
    ShellApp().run()


if __name__ == "__main__":
    main()
