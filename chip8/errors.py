class Chip8Error(Exception):
    """
    Base class for every error raised by the interpreter core.
    """


class ProgramTooLarge(Chip8Error):
    """
    The program does not fit between its load address and the end of memory.
    """
    def __init__(self, size: int, available: int):
        super().__init__(f"Program of {size} bytes does not fit in the {available} bytes available.")
        self.size = size
        self.available = available


class StackOverflow(Chip8Error):
    """
    A subroutine call was made with the call stack already full.
    """
    def __init__(self, depth: int):
        super().__init__(f"Call stack overflow, depth is already {depth}.")
        self.depth = depth


class StackUnderflow(Chip8Error):
    """
    A return from a subroutine was made with an empty call stack.
    """
    def __init__(self):
        super().__init__("Tried to return from a subroutine when the stack is empty.")


class InvalidAddress(Chip8Error):
    """
    A memory access fell outside of the addressable space.
    """
    def __init__(self, address: int):
        super().__init__(f"Memory address {hex(address)} is out of range.")
        self.address = address


class UnknownOpcode(Chip8Error):
    """
    The fetched word does not match any instruction.
    """
    def __init__(self, opcode: int):
        super().__init__(f"Unimplemented / Invalid Opcode: {opcode:04x}.")
        self.opcode = opcode
