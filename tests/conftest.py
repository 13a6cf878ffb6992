import copy
import logging
import sys

import pytest


class FakeWinreg:
    """In-memory stand-in for the winreg module, keyed by subkey path."""

    HKEY_LOCAL_MACHINE = "HKLM"
    KEY_SET_VALUE = 0x0002
    REG_DWORD = 4
    REG_MULTI_SZ = 7

    def __init__(self):
        self.keys = {}
        self.denied = set()
        self.open_handles = 0

    def _check(self, root, path):
        assert root == self.HKEY_LOCAL_MACHINE
        if path in self.denied:
            raise PermissionError(5, "Access is denied")

    def CreateKeyEx(self, root, path, reserved, access):
        self._check(root, path)
        self.keys.setdefault(path, {})
        self.open_handles += 1
        return path

    def OpenKey(self, root, path, reserved, access):
        if path not in self.keys:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        self._check(root, path)
        self.open_handles += 1
        return path

    def SetValueEx(self, key, name, reserved, reg_type, data):
        self.keys[key][name] = (reg_type, data)

    def DeleteValue(self, key, name):
        if name not in self.keys[key]:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        del self.keys[key][name]

    def CloseKey(self, key):
        self.open_handles -= 1

    # helpers for assertions
    def value(self, path, name):
        return self.keys.get(path, {}).get(name, (None, None))[1]

    def kind(self, path, name):
        return self.keys.get(path, {}).get(name, (None, None))[0]

    def has(self, path, name):
        return name in self.keys.get(path, {})

    def snapshot(self):
        return copy.deepcopy(self.keys)


class FakeDevice:
    def __init__(self, pnp):
        self.PNPDeviceID = pnp


class FakeWmi:
    def __init__(self, keyboards=(), pointing=()):
        self.keyboards = list(keyboards)
        self.pointing = list(pointing)

    def Win32_Keyboard(self):
        return [FakeDevice(x) for x in self.keyboards]

    def Win32_PointingDevice(self):
        return [FakeDevice(x) for x in self.pointing]


def answers(*values):
    it = iter(values)
    return lambda _prompt="": next(it)


@pytest.fixture
def registry(monkeypatch):
    fake = FakeWinreg()
    monkeypatch.setitem(sys.modules, "winreg", fake)
    return fake


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("usb_guard")
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    logger.propagate = True
