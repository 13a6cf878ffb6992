# usb_guard_store.py
from enum import Enum

from usb_guard_logging import get_logger

logger = get_logger("store")


class ValueKind(Enum):
    INTEGER = "integer"          # REG_DWORD
    STRING_LIST = "string_list"  # REG_MULTI_SZ


class RegistryStore:
    """Typed set/delete of named values under one registry hive.

    Paths are relative to the hive (HKEY_LOCAL_MACHINE by default).
    """

    def __init__(self, hive: str = "HKEY_LOCAL_MACHINE"):
        self.hive = hive

    def _root(self, winreg):
        return getattr(winreg, self.hive)

    def set_value(self, path: str, name: str, value, kind: ValueKind) -> None:
        import winreg

        if kind is ValueKind.INTEGER:
            reg_type, data = winreg.REG_DWORD, int(value)
        elif kind is ValueKind.STRING_LIST:
            reg_type, data = winreg.REG_MULTI_SZ, [str(v) for v in value]
        else:
            raise ValueError(f"unsupported value kind: {kind!r}")

        # CreateKeyEx opens the key if it already exists
        k = winreg.CreateKeyEx(self._root(winreg), path, 0, winreg.KEY_SET_VALUE)
        try:
            winreg.SetValueEx(k, name, 0, reg_type, data)
        finally:
            winreg.CloseKey(k)
        logger.debug(f"set {path}\\{name} = {data!r}")

    def remove_value(self, path: str, name: str) -> None:
        import winreg

        try:
            k = winreg.OpenKey(self._root(winreg), path, 0, winreg.KEY_SET_VALUE)
        except FileNotFoundError:
            logger.debug(f"remove {path}\\{name}: key absent")
            return
        except OSError as e:
            logger.warning(f"remove {path}\\{name}: cannot open key: {e}")
            return

        try:
            winreg.DeleteValue(k, name)
            logger.debug(f"removed {path}\\{name}")
        except FileNotFoundError:
            logger.debug(f"remove {path}\\{name}: value absent")
        except OSError as e:
            logger.warning(f"remove {path}\\{name} failed: {e}")
        finally:
            winreg.CloseKey(k)
