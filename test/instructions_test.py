import pytest

from chip8.errors import UnknownOpcode
from chip8.instructions import Op, decode, decode_op


def pattern_to_opcode(pattern: str, x: int = 0xa, y: int = 0xb, n: int = 0xc) -> int:
    """
    Fill in the operand characters of an instruction pattern such as "8xy4".
    """
    text = pattern.replace("nnn", f"{x:x}{y:x}{n:x}").replace("nn", f"{y:x}{n:x}")
    text = text.replace("x", f"{x:x}").replace("y", f"{y:x}").replace("n", f"{n:x}")
    return int(text, 16)


class TestDecode:
    @pytest.mark.parametrize("op", [op for op in Op if op not in (Op.CLS, Op.RET)])
    def test_documented_pattern(self, op):
        for operands in ((0x1, 0x2, 0x3), (0xf, 0xf, 0xf), (0x0, 0x1, 0x5)):
            opcode = pattern_to_opcode(op.value, *operands)
            assert decode_op(opcode) == op, f"{opcode:04x} decoded to the wrong instruction."

    def test_fixed_opcodes(self):
        assert decode_op(0x00e0) == Op.CLS, "Clear screen not decoded."
        assert decode_op(0x00ee) == Op.RET, "Return not decoded."
        assert decode_op(0x00e1) == Op.SYS, "Other 0 opcodes should be machine code routines."

    def test_operands(self):
        instruction = decode(0xd12f)
        assert instruction.op == Op.DRW, "Wrong instruction."
        assert instruction.x == 1 and instruction.y == 2 and instruction.n == 0xf, "Register or height operand incorrect."
        assert instruction.nn == 0x2f and instruction.nnn == 0x12f, "Value operands incorrect."
        assert instruction.raw == 0xd12f, "Original word not kept."
        assert str(instruction) == "d12f", "Instruction should print as its hex word."

    @pytest.mark.parametrize("opcode", [0x5001, 0x500f, 0x8008, 0x800d, 0x800f, 0x9001, 0xe09f, 0xe0a2, 0xe000, 0xf000, 0xf008, 0xf0ff, 0xf066])
    def test_unknown(self, opcode):
        with pytest.raises(UnknownOpcode):
            decode(opcode)

    def test_whole_space(self):
        counts = {op: 0 for op in Op}
        unknown = 0
        for opcode in range(0x10000):
            try:
                counts[decode_op(opcode)] += 1
            except UnknownOpcode:
                unknown += 1

        assert counts[Op.CLS] == 1 and counts[Op.RET] == 1, "Fixed opcodes matched more than once."
        assert counts[Op.SYS] == 0x1000 - 2, "Machine code routines miscounted."
        for op in (Op.JP, Op.CALL, Op.SE_BYTE, Op.SNE_BYTE, Op.LD_BYTE, Op.ADD_BYTE, Op.LD_I, Op.JP_V0, Op.RND, Op.DRW):
            assert counts[op] == 0x1000, f"{op.name} should cover its whole first character."
        for op in (Op.SE_REG, Op.SNE_REG, Op.LD_REG, Op.OR, Op.AND, Op.XOR, Op.ADD_REG, Op.SUB, Op.SHR, Op.SUBN, Op.SHL):
            assert counts[op] == 0x100, f"{op.name} should match 256 words."
        for op in (Op.SKP, Op.SKNP, Op.LD_VX_DT, Op.LD_VX_K, Op.LD_DT, Op.LD_ST, Op.ADD_I, Op.LD_F, Op.LD_B, Op.LD_MEM, Op.LD_REG_MEM):
            assert counts[op] == 0x10, f"{op.name} should match 16 words."
        assert sum(counts.values()) + unknown == 0x10000, "Some words decoded twice."
