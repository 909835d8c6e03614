import logging
import random

from enum import Enum
from typing import Optional, Tuple

from chip8.display import Display
from chip8.errors import Chip8Error
from chip8.instructions import Instruction, Op, decode
from chip8.keypad import Keypad
from chip8.memory import BYTE_MASK, LOWER_CHAR_MASK, MEMORY_SIZE, Memory
from chip8.registers import FLAG_REGISTER, RegisterFile
from chip8.timers import Timers

logger = logging.getLogger(__name__)

ADDRESS_MASK = 0xFFFF
INSTRUCTION_SIZE = 2

# The method on the CPU which executes each kind of instruction.
OPCODE_HANDLERS = {
    Op.SYS: "opcode_machine_code_routine",
    Op.CLS: "opcode_clear_screen",
    Op.RET: "opcode_return_from_subroutine",
    Op.JP: "opcode_goto",
    Op.CALL: "opcode_call_subroutine",
    Op.SE_BYTE: "opcode_if_equal",
    Op.SNE_BYTE: "opcode_if_not_equal",
    Op.SE_REG: "opcode_if_register_equal",
    Op.LD_BYTE: "opcode_set_register_value",
    Op.ADD_BYTE: "opcode_add_value",
    Op.LD_REG: "opcode_set_register_value_other_register",
    Op.OR: "opcode_set_register_bitwise_or",
    Op.AND: "opcode_set_register_bitwise_and",
    Op.XOR: "opcode_set_register_bitwise_xor",
    Op.ADD_REG: "opcode_add_other_register",
    Op.SUB: "opcode_subtract_from_first_register",
    Op.SHR: "opcode_bit_shift_right",
    Op.SUBN: "opcode_subtract_from_second_register",
    Op.SHL: "opcode_bit_shift_left",
    Op.SNE_REG: "opcode_if_register_not_equal",
    Op.LD_I: "opcode_set_register_i",
    Op.JP_V0: "opcode_goto_addition",
    Op.RND: "opcode_random_bitwise_and",
    Op.DRW: "opcode_draw_sprite",
    Op.SKP: "opcode_if_key_pressed",
    Op.SKNP: "opcode_if_key_not_pressed",
    Op.LD_VX_DT: "opcode_get_delay_timer",
    Op.LD_VX_K: "opcode_wait_for_key_press",
    Op.LD_DT: "opcode_set_delay_timer",
    Op.LD_ST: "opcode_set_sound_timer",
    Op.ADD_I: "opcode_register_i_addition",
    Op.LD_F: "opcode_set_register_i_to_hex_sprite_address",
    Op.LD_B: "opcode_binary_coded_decimal",
    Op.LD_MEM: "opcode_register_dump",
    Op.LD_REG_MEM: "opcode_register_load",
}


class CpuState(Enum):
    RUNNING = "running"
    WAITING_FOR_KEY = "waiting for key"
    HALTED = "halted"


class CPU:
    """
    The interpreter.  Owns the memory, registers, timers, display and keypad and executes one instruction per step.

    Nothing here schedules itself: the host calls step() at whatever rate it likes and tick() at 60Hz.  Neither call is
    thread safe, a host driving them from different threads must hold a lock around both.
    """
    def __init__(self, rom: Optional[bytes] = None, rng: Optional[random.Random] = None):
        """
        Constructor.
        :param rom: A program to load at the start address.
        :param rng: The source of random numbers, a fresh generator if not provided.
        """
        self.memory = Memory()
        self.registers = RegisterFile()
        self.timers = Timers()
        self.display = Display()
        self.keypad = Keypad()
        self.rng = rng if rng is not None else random.Random()

        self.state = CpuState.RUNNING
        self.key_register: Optional[int] = None
        self.halt_reason: Optional[Chip8Error] = None
        self.halt_address: Optional[int] = None
        self.draw_flag = False

        if rom is not None:
            self.load_program(rom)

    def reset(self) -> None:
        """
        Reset the state of the interpreter.  Any loaded program is discarded.
        """
        self.memory.reset()
        self.registers.reset()
        self.timers.reset()
        self.display.clear()
        self.keypad.reset()
        self.state = CpuState.RUNNING
        self.key_register = None
        self.halt_reason = None
        self.halt_address = None
        self.draw_flag = True

    def load_program(self, rom: bytes) -> None:
        """
        Copy a program into memory at the start address.  Nothing is changed if it does not fit.
        :param rom: The program.
        :raises ProgramTooLarge: If the program does not fit in memory.
        """
        self.memory.load(bytes(rom))
        logger.debug(f"Program of {len(rom)} bytes loaded.")

    @property
    def is_halted(self) -> bool:
        return self.state == CpuState.HALTED

    def sound_active(self) -> bool:
        return self.timers.sound_active()

    def tick(self) -> None:
        """
        Advance the delay and sound timers by one 60Hz tick.
        """
        self.timers.tick()

    def step(self) -> CpuState:
        """
        Execute a single instruction, or check for the awaited key press if blocked on one.
        Errors raised while executing halt the interpreter for good, with the program counter left on the instruction
        which failed.
        :return: The state after the step.
        """
        if self.state == CpuState.HALTED:
            logger.debug(f"Step ignored, the interpreter is halted: {self.halt_reason}")
            return self.state

        address = self.registers.program_counter
        try:
            if self.state == CpuState.WAITING_FOR_KEY:
                self.check_for_key_press()
            else:
                self.fetch_and_run_opcode()
        except Chip8Error as error:
            self.registers.program_counter = address
            self.halt(error, address)
        finally:
            self.keypad.latch()

        return self.state

    def run(self, steps: int) -> CpuState:
        """
        Execute up to the given number of steps, stopping early if the interpreter halts.
        """
        for _ in range(steps):
            if self.step() == CpuState.HALTED:
                break
        return self.state

    def halt(self, error: Chip8Error, address: int) -> None:
        """
        Stop the interpreter for good.
        :param error: Why it stopped.
        :param address: The address of the instruction which failed.
        """
        self.state = CpuState.HALTED
        self.halt_reason = error
        self.halt_address = address
        logger.error(f"Halting at {address:03x}: {error}  State: {self.registers.describe()}.")
        for line in self.memory.dump(address - address % 16 - 16, address + 32):
            logger.debug(line)

    def check_for_key_press(self) -> None:
        key = self.keypad.newly_pressed()
        if key is not None:
            self.store_key_press_in_waiting_register(key)

    def store_key_press_in_waiting_register(self, key: int) -> None:
        """
        Stores the provided key in the waiting register and moves past the blocking instruction.
        """
        register = self.key_register
        self.registers.set(register, key)
        self.registers.program_counter += INSTRUCTION_SIZE
        self.key_register = None
        self.state = CpuState.RUNNING
        logger.debug(f"Storing the key {key} in the register {register}, completing the blocking opcode and un-blocking all execution.")

    # region Helpers
    def register_values(self, instruction: Instruction) -> Tuple[int, int]:
        """
        Get the values of the two registers named by the instruction.
        """
        return self.registers.get(instruction.x), self.registers.get(instruction.y)

    def skip_if(self, condition: bool) -> None:
        if condition:
            self.registers.program_counter += INSTRUCTION_SIZE
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")

    def set_flag(self, value: int) -> None:
        """
        Set the flag register.  Always the last write an instruction makes, so it wins when the flag register is also the target.
        """
        self.registers.set(FLAG_REGISTER, value)

    @staticmethod
    def bounded_subtract(minuend: int, subtrahend: int) -> Tuple[int, int]:
        """
        Subtract the subtrahend from the minuend, bounded by the confines of a byte.
        :param minuend: The integer from which to subtract.
        :param subtrahend: The integer to subtract.
        :return: The result of the subtraction and the not borrow (1 if there was no borrow, 0 otherwise).
        """
        difference = minuend - subtrahend
        result = difference % 256
        not_borrow = 1 if difference >= 0 else 0
        return result, not_borrow
    # endregion

    # region Opcodes
    def fetch_and_run_opcode(self) -> None:
        """
        Fetches the big-endian instruction word at the program counter and executes it.
        """
        program_counter = self.registers.program_counter
        opcode = (self.memory.read(program_counter) << 8) | self.memory.read(program_counter + 1)
        self.run_opcode(opcode)

    def run_opcode(self, opcode: int) -> None:
        """
        Decode the provided opcode and route it to the method which executes it.  The program counter is moved to the
        next instruction first, so jumps and skips work from there.
        :param opcode: The 16-bit instruction word.
        :raises UnknownOpcode: If the word is not a valid instruction.
        """
        instruction = decode(opcode)
        self.registers.program_counter += INSTRUCTION_SIZE
        self.run_instruction(instruction)

    def run_instruction(self, instruction: Instruction) -> None:
        getattr(self, OPCODE_HANDLERS[instruction.op])(instruction)

    def opcode_machine_code_routine(self, instruction: Instruction) -> None:
        """
        Call a routine of the host machine.  There is no host machine code to run, so this is ignored.
        """
        logger.warning(f"Execute Opcode {instruction}: Ignoring call to machine code routine at {hex(instruction.nnn)}.")

    def opcode_clear_screen(self, instruction: Instruction) -> None:
        """
        Clear the screen.
        :param instruction: The instruction to execute.
        """
        self.display.clear()
        self.draw_flag = True
        logger.debug(f"Execute Opcode {instruction}: Clearing the screen.")

    def opcode_return_from_subroutine(self, instruction: Instruction) -> None:
        """
        Return from the current subroutine.
        :param instruction: The instruction to execute.
        :raises StackUnderflow: If not in a subroutine.
        """
        self.registers.program_counter = self.registers.pop()
        logger.debug(f"Execute Opcode {instruction}: Return from subroutine, continue at {hex(self.registers.program_counter)}.")

    def opcode_goto(self, instruction: Instruction) -> None:
        """
        Jump to the provided address.
        :param instruction: The instruction to execute.
        """
        self.registers.program_counter = instruction.nnn
        logger.debug(f"Execute Opcode {instruction}: Jump to address {hex(instruction.nnn)}.")

    def opcode_call_subroutine(self, instruction: Instruction) -> None:
        """
        Call the subroutine at the given address.
        :param instruction: The instruction to execute.
        :raises StackOverflow: If the call stack is full.
        """
        self.registers.push(self.registers.program_counter)
        self.registers.program_counter = instruction.nnn
        logger.debug(f"Execute Opcode {instruction}: Call subroutine at address {hex(instruction.nnn)}.")

    def opcode_if_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the provided register is equal to the provided value.
        """
        register_value = self.registers.get(instruction.x)
        logger.debug(f"Execute Opcode {instruction}: Skip next instruction if register {instruction.x}'s value ({register_value}) is {instruction.nn}.")
        self.skip_if(register_value == instruction.nn)

    def opcode_if_not_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the provided register is not equal to the provided value.
        """
        register_value = self.registers.get(instruction.x)
        logger.debug(f"Execute Opcode {instruction}: Skip next instruction if register {instruction.x}'s value ({register_value}) is not {instruction.nn}.")
        self.skip_if(register_value != instruction.nn)

    def opcode_if_register_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the values of the two provided registers are equal.
        """
        first_value, second_value = self.register_values(instruction)
        logger.debug(f"Execute Opcode {instruction}: Skip next instruction if register {instruction.x}'s value ({first_value}) is equal to register {instruction.y}'s value ({second_value}).")
        self.skip_if(first_value == second_value)

    def opcode_set_register_value(self, instruction: Instruction) -> None:
        self.registers.set(instruction.x, instruction.nn)
        logger.debug(f"Execute Opcode {instruction}: Set the value of register {instruction.x} to {instruction.nn}.")

    def opcode_add_value(self, instruction: Instruction) -> None:
        """
        Adds the provided value to the value of the provided register, wrapping around.  The carry flag (register 15) is not set.
        """
        result = (self.registers.get(instruction.x) + instruction.nn) & BYTE_MASK
        self.registers.set(instruction.x, result)
        logger.debug(f"Execute Opcode {instruction}: Add {instruction.nn} to the value of register {instruction.x} (now {result}).")

    def opcode_set_register_value_other_register(self, instruction: Instruction) -> None:
        second_value = self.registers.get(instruction.y)
        self.registers.set(instruction.x, second_value)
        logger.debug(f"Execute Opcode {instruction}: Set the value of register {instruction.x} to register {instruction.y}'s value ({second_value}).")

    def opcode_set_register_bitwise_or(self, instruction: Instruction) -> None:
        first_value, second_value = self.register_values(instruction)
        result = first_value | second_value
        self.registers.set(instruction.x, result)
        logger.debug(f"Execute Opcode {instruction}: Register {instruction.x} |= register {instruction.y} ({first_value} | {second_value} = {result}).")

    def opcode_set_register_bitwise_and(self, instruction: Instruction) -> None:
        first_value, second_value = self.register_values(instruction)
        result = first_value & second_value
        self.registers.set(instruction.x, result)
        logger.debug(f"Execute Opcode {instruction}: Register {instruction.x} &= register {instruction.y} ({first_value} & {second_value} = {result}).")

    def opcode_set_register_bitwise_xor(self, instruction: Instruction) -> None:
        first_value, second_value = self.register_values(instruction)
        result = first_value ^ second_value
        self.registers.set(instruction.x, result)
        logger.debug(f"Execute Opcode {instruction}: Register {instruction.x} ^= register {instruction.y} ({first_value} ^ {second_value} = {result}).")

    def opcode_add_other_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the sum of itself and the value of the second provided register.
        The carry flag (register 15) is set to 1 if the sum did not fit in a byte, 0 otherwise.
        :param instruction: The instruction to execute.
        """
        first_value, second_value = self.register_values(instruction)
        total = first_value + second_value
        result = total & BYTE_MASK
        carry = 1 if total > BYTE_MASK else 0
        self.registers.set(instruction.x, result)
        self.set_flag(carry)
        logger.debug(f"Execute Opcode {instruction}: Register {instruction.x} += register {instruction.y} ({first_value} + {second_value} = {result}, carry = {carry}).")

    def opcode_subtract_from_first_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the difference of itself and the value of the second provided register.
        The not borrow flag (register 15) is set.
        :param instruction: The instruction to execute.
        """
        first_value, second_value = self.register_values(instruction)
        result, not_borrow = self.bounded_subtract(first_value, second_value)
        self.registers.set(instruction.x, result)
        self.set_flag(not_borrow)
        logger.debug(f"Execute Opcode {instruction}: Register {instruction.x} -= register {instruction.y} ({first_value} - {second_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_right(self, instruction: Instruction) -> None:
        """
        Shift the value of the first provided register to the right by 1.  Register 15 gets the least significant bit from
        before the shift.  The second register is ignored.
        :param instruction: The instruction to execute.
        """
        value = self.registers.get(instruction.x)
        least_significant_bit = value & 1
        self.registers.set(instruction.x, value >> 1)
        self.set_flag(least_significant_bit)
        logger.debug(f"Execute Opcode {instruction}: Shift register {instruction.x} right ({value} >> 1 = {value >> 1}, previous least significant bit = {least_significant_bit}).")

    def opcode_subtract_from_second_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the difference of the value of the second provided register and itself.
        The not borrow flag (register 15) is set.
        :param instruction: The instruction to execute.
        """
        first_value, second_value = self.register_values(instruction)
        result, not_borrow = self.bounded_subtract(second_value, first_value)
        self.registers.set(instruction.x, result)
        self.set_flag(not_borrow)
        logger.debug(f"Execute Opcode {instruction}: Register {instruction.x} = register {instruction.y} - itself ({second_value} - {first_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_left(self, instruction: Instruction) -> None:
        """
        Shift the value of the first provided register to the left by 1.  Register 15 gets the most significant bit from
        before the shift.  The second register is ignored.
        :param instruction: The instruction to execute.
        """
        value = self.registers.get(instruction.x)
        result = (value << 1) & BYTE_MASK
        most_significant_bit = value >> 7
        self.registers.set(instruction.x, result)
        self.set_flag(most_significant_bit)
        logger.debug(f"Execute Opcode {instruction}: Shift register {instruction.x} left ({value} << 1 = {result}, previous most significant bit = {most_significant_bit}).")

    def opcode_if_register_not_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the values of the two provided registers differ.
        """
        first_value, second_value = self.register_values(instruction)
        logger.debug(f"Execute Opcode {instruction}: Skip next instruction if register {instruction.x}'s value ({first_value}) is not equal to register {instruction.y}'s value ({second_value}).")
        self.skip_if(first_value != second_value)

    def opcode_set_register_i(self, instruction: Instruction) -> None:
        self.registers.index_register = instruction.nnn
        logger.debug(f"Execute Opcode {instruction}: Set register I to {hex(instruction.nnn)}.")

    def opcode_goto_addition(self, instruction: Instruction) -> None:
        """
        Jump to the provided address plus the value of register 0.  A target past the end of memory is caught by the next fetch.
        """
        register_value = self.registers.get(0)
        self.registers.program_counter = instruction.nnn + register_value
        logger.debug(f"Execute Opcode {instruction}: Jump to the provided address plus the value of register 0 ({hex(instruction.nnn)} + {hex(register_value)} = {hex(self.registers.program_counter)}).")

    def opcode_random_bitwise_and(self, instruction: Instruction) -> None:
        """
        Set the value of the provided register to the bitwise and of the provided value and a random number [0, 255].
        """
        random_value = self.rng.randint(0, BYTE_MASK)
        result = instruction.nn & random_value
        self.registers.set(instruction.x, result)
        logger.debug(f"Execute Opcode {instruction}: Set register {instruction.x} to a masked random number ({instruction.nn} & {random_value} = {result}).")

    def opcode_draw_sprite(self, instruction: Instruction) -> None:
        """
        Draws the sprite with the provided height found at the address in register I at the coordinates held in the two
        provided registers.  The collision flag (register 15) is set to 1 if a pixel was unset, 0 otherwise.
        :param instruction: The instruction to execute.
        :raises InvalidAddress: If the sprite runs past the end of memory.
        """
        x_value, y_value = self.register_values(instruction)
        address = self.registers.index_register
        sprite = self.memory.read_block(address, instruction.n)
        collision = self.display.draw_sprite(x_value, y_value, sprite)
        self.set_flag(1 if collision else 0)
        self.draw_flag = True
        logger.debug(f"Execute Opcode {instruction}: Drawing the sprite with a height of {instruction.n} found at address {hex(address)} at ({x_value}, {y_value}), collision = {collision}.")

    def opcode_if_key_pressed(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is pressed.
        """
        key = self.registers.get(instruction.x) & LOWER_CHAR_MASK
        pressed = self.keypad.is_pressed(key)
        logger.debug(f"Execute Opcode {instruction}: Skip next instruction if key {key} (register {instruction.x}) is pressed ({pressed}).")
        self.skip_if(pressed)

    def opcode_if_key_not_pressed(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is not pressed.
        """
        key = self.registers.get(instruction.x) & LOWER_CHAR_MASK
        pressed = self.keypad.is_pressed(key)
        logger.debug(f"Execute Opcode {instruction}: Skip next instruction if key {key} (register {instruction.x}) is not pressed ({pressed}).")
        self.skip_if(not pressed)

    def opcode_get_delay_timer(self, instruction: Instruction) -> None:
        self.registers.set(instruction.x, self.timers.delay_value())
        logger.debug(f"Execute Opcode {instruction}: Set the value of register {instruction.x} to the value of the delay timer ({self.timers.delay_value()}).")

    def opcode_wait_for_key_press(self, instruction: Instruction) -> None:
        """
        Store a freshly pressed key in the provided register.  If no key went down since the last step, the program
        counter is held on this instruction and the interpreter waits until one does.
        :param instruction: The instruction to execute.
        """
        key = self.keypad.newly_pressed()
        if key is not None:
            self.registers.set(instruction.x, key)
            logger.debug(f"Execute Opcode {instruction}: Key {key} already pressed, stored in register {instruction.x}.")
            return

        self.registers.program_counter -= INSTRUCTION_SIZE
        self.key_register = instruction.x
        self.state = CpuState.WAITING_FOR_KEY
        logger.debug(f"Execute Opcode {instruction}: Blocking until a keypress is detected and stored in register {instruction.x}.")

    def opcode_set_delay_timer(self, instruction: Instruction) -> None:
        register_value = self.registers.get(instruction.x)
        self.timers.set_delay(register_value)
        logger.debug(f"Execute Opcode {instruction}: Set the value of the delay timer to the value of register {instruction.x} ({register_value}).")

    def opcode_set_sound_timer(self, instruction: Instruction) -> None:
        """
        Sets the sound timer to the value of the provided register.  The beep plays for as long as it is above 0.
        """
        register_value = self.registers.get(instruction.x)
        self.timers.set_sound(register_value)
        logger.debug(f"Execute Opcode {instruction}: Set the value of the sound timer to the value of register {instruction.x} ({register_value}).")

    def opcode_register_i_addition(self, instruction: Instruction) -> None:
        """
        Add the value of the provided register to register I.  The overflow flag (register 15) is set if the result is
        past the end of memory.  The result itself is not wrapped, so using it as an address halts.
        :param instruction: The instruction to execute.
        """
        register_value = self.registers.get(instruction.x)
        register_i_value = self.registers.index_register
        result = (register_i_value + register_value) & ADDRESS_MASK
        overflow = 1 if result >= MEMORY_SIZE else 0
        self.registers.index_register = result
        self.set_flag(overflow)
        logger.debug(f"Execute Opcode {instruction}: Add the value of register {instruction.x} to register I ({register_i_value} + {register_value} = {result}, overflow = {overflow}).")

    def opcode_set_register_i_to_hex_sprite_address(self, instruction: Instruction) -> None:
        """
        Sets the value of register I to the address of the hexadecimal sprite for the value in the provided register.
        Only the lower character of the value is used.
        """
        register_value = self.registers.get(instruction.x)
        self.registers.index_register = self.memory.digit_sprite_address(register_value)
        logger.debug(f"Execute Opcode {instruction}: Set register I to the address ({self.registers.index_register}) of the sprite for the value of register {instruction.x} ({register_value}).")

    def opcode_binary_coded_decimal(self, instruction: Instruction) -> None:
        """
        Store the Binary Coded Decimal representation of the value of the provided register in memory, starting at the value of register I.
        Hundreds digit stored in memory at the location of the value of register I.
        Tens digit stored in memory at the location of the value of register I + 1.
        Units digit stored in memory at the location of the value of register I + 2.
        :param instruction: The instruction to execute.
        :raises InvalidAddress: If any of the three addresses is out of memory, in which case nothing is written.
        """
        register_value = self.registers.get(instruction.x)
        address = self.registers.index_register
        digits = (register_value // 100, register_value // 10 % 10, register_value % 10)
        self.memory.check_address(address)
        self.memory.check_address(address + len(digits) - 1)
        for offset, digit in enumerate(digits):
            self.memory.write(address + offset, digit)
        logger.debug(f"Execute Opcode {instruction}: Store the Binary Coded Decimal representation of register {instruction.x}'s value ({register_value}) at {hex(address)} ({digits}).")

    def opcode_register_dump(self, instruction: Instruction) -> None:
        """
        Store the values of all registers from register 0 to the provided register in memory, starting at the value of register I.
        Register I is left untouched.
        :param instruction: The instruction to execute.
        """
        last_register = instruction.x
        address = self.registers.index_register
        self.memory.check_address(address)
        self.memory.check_address(address + last_register)
        logger.debug(f"Execute Opcode {instruction}: Dumping the values of registers 0 to {last_register} into memory, starting at {hex(address)}.")
        for register in range(last_register + 1):
            self.memory.write(address + register, self.registers.get(register))

    def opcode_register_load(self, instruction: Instruction) -> None:
        """
        Load the values of all registers from register 0 to the provided register from memory, starting at the value of register I.
        Register I is left untouched.
        :param instruction: The instruction to execute.
        """
        last_register = instruction.x
        address = self.registers.index_register
        values = self.memory.read_block(address, last_register + 1)
        logger.debug(f"Execute Opcode {instruction}: Loading the values of registers 0 to {last_register} from memory, starting at {hex(address)}.")
        for register, value in enumerate(values):
            self.registers.set(register, value)
    # endregion
