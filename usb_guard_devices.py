# usb_guard_devices.py
from usb_guard_logging import get_logger

logger = get_logger("devices")


class DeviceEnumerator:
    """
    Lists *currently present* keyboards and pointing devices.
    Hardware IDs are the WMI PNPDeviceID strings, which the device install
    policy accepts in its allow-list.
    """

    def __init__(self, connection=None):
        self._connection = connection

    @property
    def connection(self):
        if self._connection is None:
            import wmi
            self._connection = wmi.WMI()
        return self._connection

    def _pnp_ids(self, wmi_class: str):
        ids = []
        for d in getattr(self.connection, wmi_class)():
            # device instance path (HID\VID_...&PID_...\<instance>), not a hardware ID
            pnp = (getattr(d, "PNPDeviceID", "") or "").strip()
            if pnp:
                ids.append(pnp)
        logger.debug(f"{wmi_class}: {ids}")
        return ids

    def current_keyboard_ids(self):
        return self._pnp_ids("Win32_Keyboard")

    def current_pointing_device_ids(self):
        return self._pnp_ids("Win32_PointingDevice")
