import logging

from typing import List

from chip8.errors import InvalidAddress, ProgramTooLarge

logger = logging.getLogger(__name__)

# Constants
MEMORY_SIZE = 4096
BYTE_MASK = 255
LOWER_CHAR_MASK = 15
GAME_START_ADDRESS = 512
INTERPRETER_END_ADDRESS = 80
DIGIT_SPRITE_HEIGHT = 5

DIGIT_SPRITES = [
    "f0909090f0",  # 0
    "2060202070",  # 1
    "f010f080f0",  # 2
    "f010f010f0",  # 3
    "9090f01010",  # 4
    "f080f010f0",  # 5
    "f080f090f0",  # 6
    "f010204040",  # 7
    "f090f090f0",  # 8
    "f090f010f0",  # 9
    "f090f09090",  # a
    "e090e090e0",  # b
    "f0808080f0",  # c
    "e0909090e0",  # d
    "f080f080f0",  # e
    "f080f08080",  # f
]


class Memory:
    """
    The 4K of byte addressable memory.  Addresses outside of it are fatal rather than wrapped.
    """
    def __init__(self):
        self.ram = bytearray(MEMORY_SIZE)
        self.load_digit_sprites()

    def __len__(self) -> int:
        return len(self.ram)

    def reset(self) -> None:
        """
        Zero all of memory and put the digit sprites back.
        """
        self.ram = bytearray(MEMORY_SIZE)
        self.load_digit_sprites()

    @staticmethod
    def check_address(address: int) -> None:
        """
        Make sure the given address is within memory.
        :param address: The address to check.
        :raises InvalidAddress: If the address is outside of memory.
        """
        if not 0 <= address < MEMORY_SIZE:
            raise InvalidAddress(address)

    def read(self, address: int) -> int:
        """
        Read the byte at the given address.
        :param address: The address to read.
        :return: The byte stored there.
        """
        self.check_address(address)
        return self.ram[address]

    def write(self, address: int, value: int) -> None:
        """
        Write a byte to the given address.
        :param address: The address to write to.
        :param value: The value to store, only the lowest byte is kept.
        """
        self.check_address(address)
        self.ram[address] = value & BYTE_MASK

    def read_block(self, address: int, length: int) -> bytes:
        """
        Read a run of bytes starting at the given address.
        :param address: The first address to read.
        :param length: The number of bytes to read.
        :return: The bytes read.
        """
        if length > 0:
            self.check_address(address)
            self.check_address(address + length - 1)
        return bytes(self.ram[address:address + length])

    def load(self, data: bytes, offset: int = GAME_START_ADDRESS) -> None:
        """
        Copy the given bytes into memory.  Nothing is written if they do not fit.
        :param data: The bytes to copy.
        :param offset: The address of the first byte.
        :raises ProgramTooLarge: If the data runs past the end of memory.
        """
        self.check_address(offset)
        available = MEMORY_SIZE - offset
        if len(data) > available:
            raise ProgramTooLarge(len(data), available)

        self.ram[offset:offset + len(data)] = data
        logger.debug(f"Loaded {len(data)} bytes at address {hex(offset)}.")

    def load_digit_sprites(self) -> None:
        """
        Load the sprites for the hexadecimal digits 0-f into memory.
        """
        for digit, sprite in enumerate(DIGIT_SPRITES):
            start = digit * DIGIT_SPRITE_HEIGHT
            self.ram[start:start + DIGIT_SPRITE_HEIGHT] = bytes.fromhex(sprite)

    @staticmethod
    def digit_sprite_address(digit: int) -> int:
        """
        Get the address of the sprite for a hexadecimal digit.
        :param digit: The digit, only the lower character is used.
        :return: The address of the first row of the sprite.
        """
        return (digit & LOWER_CHAR_MASK) * DIGIT_SPRITE_HEIGHT

    def dump(self, start: int = 0, end: int = MEMORY_SIZE) -> List[str]:
        """
        Produce a hex listing of a range of memory, 16 bytes per line.
        """
        lines = []
        for address in range(max(start, 0), min(end, MEMORY_SIZE), 16):
            row = self.ram[address:min(address + 16, end)]
            lines.append(f"{address:03x}: {row.hex(' ')}")
        return lines
