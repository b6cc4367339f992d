from va_compensation_calculator.console import ConsoleSession
from va_compensation_calculator.logging_config import setup_logging
from va_compensation_calculator.menu import MenuLoop


def main():
    setup_logging()

    # One console session for the whole run; closed when the menu exits.
    with ConsoleSession() as console:
        status = MenuLoop(console).run()

    raise SystemExit(status)


if __name__ == "__main__":
    main()
