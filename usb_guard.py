# usb_guard.py
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from usb_guard_devices import DeviceEnumerator
from usb_guard_logging import get_logger, setup_logging
from usb_guard_policy import UsbPolicyWriter
from usb_guard_scenarios import MENU_LABELS, Scenario, ScenarioRunner
from usb_guard_store import RegistryStore

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LOG_PATH = os.path.join(BASE_DIR, "data", "usb_guard.log")

BANNER = (
    "==============================================\n"
    " USB Guard - USB device access policy\n"
    " Run as Administrator. Changes need a restart.\n"
    "=============================================="
)

logger = get_logger("main")


@dataclass
class StartupConfig:
    log_path: Path
    debug: bool = False
    banner: str = BANNER


def configure(argv) -> StartupConfig:
    log_path = os.environ.get("USB_GUARD_LOG") or DEFAULT_LOG_PATH
    return StartupConfig(log_path=Path(log_path), debug="--debug" in argv)


# ------------------ Privilege guard ------------------
def has_elevated_privileges() -> bool:
    import pywintypes
    from win32com.shell import shell

    try:
        return bool(shell.IsUserAnAdmin())
    except pywintypes.error as e:
        logger.warning(f"IsUserAnAdmin failed: {e}")
        return False


# ------------------ Menu ------------------
def show_menu(runner: ScenarioRunner, ask=input):
    print("Select a configuration:")
    for scenario in Scenario:
        print(f"  {scenario.value}. {MENU_LABELS[scenario]}")

    try:
        choice = ask("Choice: ")
    except EOFError:
        choice = ""

    try:
        scenario = Scenario(choice)
    except ValueError:
        logger.info(f"invalid menu choice: {choice!r}")
        print("Invalid choice.")
        return None

    return runner.run(scenario)


def main(argv=None, ask=input):
    if argv is None:
        argv = sys.argv[1:]

    config = configure(argv)
    setup_logging(config.log_path, debug=config.debug)
    print(config.banner)

    if not has_elevated_privileges():
        logger.error("not running with administrative rights, aborting")
        print("WARNING: this tool must be run as Administrator. Nothing was changed.")
        sys.exit(1)

    runner = ScenarioRunner(UsbPolicyWriter(RegistryStore()), DeviceEnumerator(), ask=ask)

    try:
        show_menu(runner, ask=ask)
    except Exception as e:
        logger.exception("failed to apply configuration")
        print("ERROR:", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
