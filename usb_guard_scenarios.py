# usb_guard_scenarios.py
from enum import Enum

from usb_guard_devices import DeviceEnumerator
from usb_guard_logging import get_logger
from usb_guard_policy import UsbPolicyWriter

logger = get_logger("scenarios")

CONFIRM = "Y"  # exact, case-sensitive: "y" cancels


class Scenario(Enum):
    HID_ONLY = "1"
    STORAGE_DISABLED_KEEP_INPUT = "2"
    RESTORE_DEFAULT = "3"


class RunState(Enum):
    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    APPLYING = "applying"
    DONE = "done"
    CANCELLED = "cancelled"


MENU_LABELS = {
    Scenario.HID_ONLY: "Lock down everything (allow only the current keyboard and mouse)",
    Scenario.STORAGE_DISABLED_KEEP_INPUT: "Lock down USB storage only",
    Scenario.RESTORE_DEFAULT: "Restore default USB settings",
}

EXPLANATIONS = {
    Scenario.HID_ONLY: (
        "This will deny ALL removable storage, disable the USB storage driver\n"
        "and allow-list only the keyboards and pointing devices attached right now."
    ),
    Scenario.STORAGE_DISABLED_KEEP_INPUT: (
        "This will deny ALL removable storage and disable the USB storage driver.\n"
        "Keyboards and mice keep working."
    ),
    Scenario.RESTORE_DEFAULT: (
        "This will remove the removable storage restrictions and set the\n"
        "USB storage driver back to manual start."
    ),
}


class ScenarioRunner:
    """Runs one scenario: explain, confirm, apply. One transition per run."""

    def __init__(self, writer: UsbPolicyWriter, devices: DeviceEnumerator, ask=input):
        self.writer = writer
        self.devices = devices
        self.ask = ask
        self.state = RunState.IDLE

    def run(self, scenario: Scenario) -> RunState:
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"runner already used (state={self.state.value})")

        logger.info(f"scenario selected: {scenario.name}")
        print()
        print(EXPLANATIONS[scenario])
        self.state = RunState.AWAITING_CONFIRMATION

        try:
            answer = self.ask(f"Continue? Type {CONFIRM} to confirm: ")
        except EOFError:
            answer = ""

        if answer != CONFIRM:
            self.state = RunState.CANCELLED
            logger.info(f"scenario {scenario.name} cancelled (answer={answer!r})")
            print("Operation cancelled.")
            return self.state

        self.state = RunState.APPLYING
        self._apply(scenario)
        self.state = RunState.DONE
        logger.info(f"scenario {scenario.name} applied")
        print("Done. Restart the computer for the changes to take effect.")
        return self.state

    def _apply(self, scenario: Scenario) -> None:
        if scenario is Scenario.HID_ONLY:
            self.writer.disable_removable_storage()
            ids = self.devices.current_keyboard_ids() + self.devices.current_pointing_device_ids()
            self.writer.allow_devices(ids)
        elif scenario is Scenario.STORAGE_DISABLED_KEEP_INPUT:
            self.writer.disable_removable_storage()
        elif scenario is Scenario.RESTORE_DEFAULT:
            self.writer.restore_defaults()
