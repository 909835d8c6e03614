from typing import List

from chip8.errors import StackOverflow, StackUnderflow
from chip8.memory import BYTE_MASK, GAME_START_ADDRESS

# Constants
REGISTER_COUNT = 16
FLAG_REGISTER = 15
STACK_DEPTH = 16


class RegisterFile:
    """
    The general purpose registers, register I, the program counter and the call stack.
    """
    def __init__(self):
        self.v = bytearray(REGISTER_COUNT)
        self.index_register = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack: List[int] = []

    def reset(self) -> None:
        self.v = bytearray(REGISTER_COUNT)
        self.index_register = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack = []

    def get(self, register: int) -> int:
        return self.v[register]

    def set(self, register: int, value: int) -> None:
        """
        Set a general purpose register, keeping only the lowest byte of the value.
        """
        self.v[register] = value & BYTE_MASK

    @property
    def stack_pointer(self) -> int:
        return len(self.stack)

    def push(self, address: int) -> None:
        """
        Push a return address onto the call stack.
        :param address: The address to return to.
        :raises StackOverflow: If the stack is already full.
        """
        if len(self.stack) >= STACK_DEPTH:
            raise StackOverflow(len(self.stack))
        self.stack.append(address)

    def pop(self) -> int:
        """
        Pop the most recent return address off of the call stack.
        :return: The address to return to.
        :raises StackUnderflow: If the stack is empty.
        """
        if len(self.stack) == 0:
            raise StackUnderflow()
        return self.stack.pop()

    def describe(self) -> str:
        registers = " ".join(f"v{index:x}={value:02x}" for index, value in enumerate(self.v))
        return f"pc={self.program_counter:03x} i={self.index_register:03x} sp={self.stack_pointer} {registers}"
