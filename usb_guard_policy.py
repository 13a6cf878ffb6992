# usb_guard_policy.py
from usb_guard_logging import get_logger
from usb_guard_store import RegistryStore, ValueKind

logger = get_logger("policy")

REMOVABLE_STORAGE = r"SOFTWARE\Policies\Microsoft\Windows\RemovableStorageDevices"
USBSTOR_SERVICE = r"SYSTEM\CurrentControlSet\Services\USBSTOR"
RESTRICTIONS = r"SOFTWARE\Policies\Microsoft\Windows\DeviceInstall\Restrictions"

# stored as one REG_MULTI_SZ, not the DWORD switch + numbered subkey layout of
# the Group Policy editor
ALLOW_LIST_VALUE = "AllowDeviceIDs"
START_VALUE = "Start"

# service start types
START_MANUAL = 3
START_DISABLED = 4

# "All Removable Storage classes: Deny all access" plus the per-class toggles
STORAGE_DISABLED_FLAGS = [
    ("Deny_All", 1),
    ("AllowFloppy", 0),
    ("AllowCDROM", 0),
    ("AllowTape", 0),
]


class UsbPolicyWriter:
    def __init__(self, store: RegistryStore):
        self.store = store

    def disable_removable_storage(self) -> None:
        for name, value in STORAGE_DISABLED_FLAGS:
            self.store.set_value(REMOVABLE_STORAGE, name, value, ValueKind.INTEGER)
        self.store.set_value(USBSTOR_SERVICE, START_VALUE, START_DISABLED, ValueKind.INTEGER)
        logger.info("removable storage disabled")

    def allow_devices(self, hardware_ids) -> None:
        ids = list(hardware_ids)
        # replaces any previous allow-list
        self.store.set_value(RESTRICTIONS, ALLOW_LIST_VALUE, ids, ValueKind.STRING_LIST)
        logger.info(f"allow-list written with {len(ids)} device(s)")

    def restore_defaults(self) -> None:
        for name, _ in STORAGE_DISABLED_FLAGS:
            self.store.remove_value(REMOVABLE_STORAGE, name)
        # the driver key must always hold a start type, so write rather than delete
        self.store.set_value(USBSTOR_SERVICE, START_VALUE, START_MANUAL, ValueKind.INTEGER)
        logger.info("removable storage restored to defaults")
