from dataclasses import dataclass
from enum import Enum

from chip8.errors import UnknownOpcode


class Op(Enum):
    """
    Every kind of instruction the interpreter knows about.
    """
    SYS = "0nnn"
    CLS = "00e0"
    RET = "00ee"
    JP = "1nnn"
    CALL = "2nnn"
    SE_BYTE = "3xnn"
    SNE_BYTE = "4xnn"
    SE_REG = "5xy0"
    LD_BYTE = "6xnn"
    ADD_BYTE = "7xnn"
    LD_REG = "8xy0"
    OR = "8xy1"
    AND = "8xy2"
    XOR = "8xy3"
    ADD_REG = "8xy4"
    SUB = "8xy5"
    SHR = "8xy6"
    SUBN = "8xy7"
    SHL = "8xye"
    SNE_REG = "9xy0"
    LD_I = "annn"
    JP_V0 = "bnnn"
    RND = "cxnn"
    DRW = "dxyn"
    SKP = "ex9e"
    SKNP = "exa1"
    LD_VX_DT = "fx07"
    LD_VX_K = "fx0a"
    LD_DT = "fx15"
    LD_ST = "fx18"
    ADD_I = "fx1e"
    LD_F = "fx29"
    LD_B = "fx33"
    LD_MEM = "fx55"
    LD_REG_MEM = "fx65"


# Secondary lookups for the families which share a first character.
ARITHMETIC_OPS = {
    0x0: Op.LD_REG,
    0x1: Op.OR,
    0x2: Op.AND,
    0x3: Op.XOR,
    0x4: Op.ADD_REG,
    0x5: Op.SUB,
    0x6: Op.SHR,
    0x7: Op.SUBN,
    0xE: Op.SHL,
}

KEY_OPS = {
    0x9E: Op.SKP,
    0xA1: Op.SKNP,
}

MISC_OPS = {
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_VX_K,
    0x15: Op.LD_DT,
    0x18: Op.LD_ST,
    0x1E: Op.ADD_I,
    0x29: Op.LD_F,
    0x33: Op.LD_B,
    0x55: Op.LD_MEM,
    0x65: Op.LD_REG_MEM,
}

SIMPLE_OPS = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_BYTE,
    0x4: Op.SNE_BYTE,
    0x6: Op.LD_BYTE,
    0x7: Op.ADD_BYTE,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW,
}


@dataclass(frozen=True)
class Instruction:
    """
    A decoded instruction along with every operand field of the word it came from.
    """
    op: Op
    raw: int
    x: int
    y: int
    n: int
    nn: int
    nnn: int

    def __str__(self) -> str:
        return f"{self.raw:04x}"


def decode_op(opcode: int) -> Op:
    """
    Find the kind of instruction the given word encodes.
    :param opcode: The 16-bit instruction word.
    :return: The kind of instruction.
    :raises UnknownOpcode: If the word is not a valid instruction.
    """
    first_char = (opcode >> 12) & 0xF
    last_char = opcode & 0xF
    low_byte = opcode & 0xFF

    if first_char == 0x0:
        if opcode == 0x00E0:
            return Op.CLS
        if opcode == 0x00EE:
            return Op.RET
        return Op.SYS
    if first_char in SIMPLE_OPS:
        return SIMPLE_OPS[first_char]
    if first_char == 0x5 and last_char == 0:
        return Op.SE_REG
    if first_char == 0x9 and last_char == 0:
        return Op.SNE_REG
    if first_char == 0x8 and last_char in ARITHMETIC_OPS:
        return ARITHMETIC_OPS[last_char]
    if first_char == 0xE and low_byte in KEY_OPS:
        return KEY_OPS[low_byte]
    if first_char == 0xF and low_byte in MISC_OPS:
        return MISC_OPS[low_byte]
    raise UnknownOpcode(opcode)


def decode(opcode: int) -> Instruction:
    """
    Decode a 16-bit instruction word, extracting its operands once.
    """
    return Instruction(
        op=decode_op(opcode),
        raw=opcode,
        x=(opcode >> 8) & 0xF,
        y=(opcode >> 4) & 0xF,
        n=opcode & 0xF,
        nn=opcode & 0xFF,
        nnn=opcode & 0xFFF,
    )
