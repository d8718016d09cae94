"""Single-instance objects, including a thread-safe operating system."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

_lock = threading.Lock()


class Singleton:
    """A class with exactly one instance, reached through get_instance."""

    _instance: Singleton | None = None

    def __init__(self) -> None:
        raise TypeError("use Singleton.get_instance()")

    def __copy__(self):
        raise TypeError("Singleton cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Singleton cannot be copied")

    @classmethod
    def get_instance(cls) -> Singleton:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance


class OperationSystem:
    """The one running system; the first title it is started with stays."""

    _system: OperationSystem | None = None

    def __init__(self) -> None:
        raise TypeError("use OperationSystem.start_system()")

    @property
    def title(self) -> str:
        return self._title

    @classmethod
    def start_system(cls, title: str) -> OperationSystem:
        with _lock:
            if cls._system is None:
                system = object.__new__(cls)
                system._title = title
                cls._system = system
            return cls._system


class Computer:
    """A machine that runs the shared operating system."""

    def __init__(self) -> None:
        self.system: OperationSystem | None = None

    def launch_system(self, title: str) -> None:
        self.system = OperationSystem.start_system(title)


def computer_start(os_title: str, file: TextIO | None = None) -> Computer:
    """Start a computer, print the title of the system it runs and return it."""
    computer = Computer()
    computer.launch_system(os_title)
    print(computer.system.title, file=file if file is not None else sys.stdout)
    return computer


def main(argv: list[str] | None = None) -> int:
    threads = [
        threading.Thread(target=computer_start, args=(title,))
        for title in ("Ubuntu", "Windows", "Debian")
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())