import sys


def _pause() -> None:
    try:
        input("Press Enter to exit...")
    except EOFError:
        # No console attached to read from
        pass


def _fail(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
    _pause()
    sys.exit(1)


def main():
    # Settings load on first import; a bad file must still reach the pause
    try:
        import config
    except ValueError as e:
        _fail(f"Invalid settings file: {e}")

    from privilege import is_elevated, relaunch_elevated
    from logger import log

    if not is_elevated():
        if relaunch_elevated():
            log.info("Relaunched elevated; exiting unprivileged instance")
            sys.exit(0)
        _fail("This wizard must be run with administrative privileges.")
    from app import BootstrapWizard
    BootstrapWizard().run()
    sys.exit(0)

if __name__ == "__main__":
    main()
