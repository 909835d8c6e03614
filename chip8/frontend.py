import logging
import sys
import threading

import easygui
import numpy as np
import pygame

from pathlib import Path
from typing import Optional

from chip8.cpu import CPU, CpuState
from chip8.display import SCREEN_HEIGHT, SCREEN_WIDTH
from chip8.errors import ProgramTooLarge

logger = logging.getLogger(__name__)

# Constants
CAPTION = "ChipPy"
SCALED_SCREEN_WIDTH = 800
SCALED_SCREEN_HEIGHT = 400
FRAME_RATE = 60
TIMER_DELAY = 1 / 60
OPCODE_DELAY = 1 / 500
SOUND_FREQUENCY = 44100
SOUND_BUFFER = 4096
SOUND_AMPLITUDE = 4096
TONE_HZ = 440
GAMES_PATH = str(Path(__file__).resolve().parent.parent.joinpath("games/.chip8"))

COLOUR_PALETTE = [(0, 0, 0), (0, 255, 0)]

# The keypad is laid out on the left of a QWERTY keyboard:
#   1 2 3 C      1 2 3 4
#   4 5 6 D  =>  Q W E R
#   7 8 9 E      A S D F
#   A 0 B F      Z X C V
KEY_LOOKUP = {
    pygame.K_1: 1,
    pygame.K_q: 4,
    pygame.K_a: 7,
    pygame.K_z: 10,
    pygame.K_2: 2,
    pygame.K_w: 5,
    pygame.K_s: 8,
    pygame.K_x: 0,
    pygame.K_3: 3,
    pygame.K_e: 6,
    pygame.K_d: 9,
    pygame.K_c: 11,
    pygame.K_4: 12,
    pygame.K_r: 13,
    pygame.K_f: 14,
    pygame.K_v: 15,
}


def make_tone() -> pygame.mixer.Sound:
    """
    Build one second of a square wave at the tone frequency, to be looped while the sound timer runs.
    """
    length = SOUND_FREQUENCY / TONE_HZ
    omega = np.pi * 2 / length
    x_values = np.arange(int(length)) * omega
    one_cycle = SOUND_AMPLITUDE * np.where(np.sin(x_values) >= 0, 1, -1)
    sound_wave = np.resize(one_cycle, (SOUND_FREQUENCY,)).astype(np.int16)
    return pygame.sndarray.make_sound(sound_wave)


class Frontend:
    """
    The window, speaker and keyboard around the interpreter.  Instructions and timer ticks each run on their own
    timer thread; every call into the interpreter goes through one lock.
    """
    def __init__(self, cpu: Optional[CPU] = None):
        """
        Constructor.
        :param cpu: The interpreter to drive, a fresh one if not provided.
        """
        self.cpu = cpu if cpu is not None else CPU()
        self.lock = threading.Lock()
        self.game_loaded = False
        self.selecting_game = False
        self.running = True
        self.sound_playing = False
        self.halt_reported = False

        self.opcode_timer: Optional[threading.Timer] = None
        self.tick_timer: Optional[threading.Timer] = None

        pygame.mixer.init(SOUND_FREQUENCY, -16, 1, SOUND_BUFFER)
        pygame.init()
        pygame.display.init()
        self.sound_player = make_tone()

        pygame.display.set_caption(CAPTION)
        self.screen = pygame.display.set_mode((SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), 0, 8)
        self.screen.set_palette(COLOUR_PALETTE)
        self.inter_screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 8)
        self.inter_screen.set_palette(COLOUR_PALETTE)

    def reset(self) -> None:
        """
        Stop the running game and reset the interpreter.
        """
        with self.lock:
            self.game_loaded = False
        self.toggle_all_timers(False)
        self.selecting_game = False
        self.halt_reported = False
        self.stop_sound()
        with self.lock:
            self.cpu.reset()
        self.draw_to_display()
        pygame.display.set_caption(CAPTION)

    def load_game(self) -> None:
        """
        Stop any currently running game, load the selected game into memory, and start it up.
        """
        if self.game_loaded:
            self.reset()

        self.selecting_game = True
        file_name = easygui.fileopenbox(title="Select a Game", default=GAMES_PATH, filetypes=[["*.chip8", "*.ch8", "CHIP-8"]])
        self.selecting_game = False

        if not file_name:
            easygui.msgbox("Pick a game to play!  Press the L key to re-open the game picker.", "No Game Selected")
            return

        path = Path(file_name)

        if not path.exists():
            easygui.msgbox(f"Game could not be loaded as the path does not exist!  Path: {path}.", "Game Not Found")
            return

        logger.debug(f"Loading game at path {path}.")
        game = path.read_bytes()
        try:
            with self.lock:
                self.cpu.load_program(game)
        except ProgramTooLarge as error:
            logger.error(f"Could not load {path}: {error}")
            easygui.msgbox(f"Game could not be loaded as it is too large!  {error}", "Game Too Large")
            return

        pygame.display.set_caption(path.stem)

        self.game_loaded = True
        self.toggle_all_timers(True)

    # region Presentation
    def draw_to_display(self) -> None:
        """
        Update the display from the interpreter's pixels.
        """
        with self.lock:
            pixels = self.cpu.display.pixels.astype(np.ubyte)
            self.cpu.draw_flag = False
        pygame.surfarray.blit_array(self.inter_screen, pixels)
        pygame.transform.scale(self.inter_screen, (SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), self.screen)
        pygame.display.flip()

    def update_sound(self) -> None:
        """
        Start or stop the tone to follow the sound timer.
        """
        with self.lock:
            active = self.cpu.sound_active()
        if active and not self.sound_playing:
            self.sound_player.play(-1)
            self.sound_playing = True
            logger.debug("Starting sound.")
        elif not active and self.sound_playing:
            self.stop_sound()

    def stop_sound(self) -> None:
        self.sound_player.stop()
        if self.sound_playing:
            logger.debug("Stopping sound.")
        self.sound_playing = False

    def report_halt(self) -> None:
        """
        Tell the player the game stopped, once per halt.
        """
        if self.halt_reported or not self.cpu.is_halted:
            return

        self.halt_reported = True
        self.toggle_all_timers(False)
        self.stop_sound()
        easygui.msgbox(f"The game stopped with an error: {self.cpu.halt_reason}  Press the L key to load another game.", "Game Halted")
    # endregion

    # region Events
    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Handle a single pygame event.
        """
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key releases made in another window never arrive.
            with self.lock:
                self.cpu.keypad.release_all()
        elif event.type == pygame.KEYDOWN or event.type == pygame.KEYUP:
            pressed = event.type == pygame.KEYDOWN

            if pressed and event.key == pygame.K_l and not self.selecting_game:
                self.load_game()
                return

            # CHIP-8 Controls
            key = KEY_LOOKUP.get(event.key, None)
            if key is not None:
                with self.lock:
                    self.cpu.keypad.set_key(key, pressed)
                logger.debug(f"Key State Changed.  Key: {key}, Pressed: {pressed}.")

    def event_loop(self) -> None:
        """
        Loop which handles all events and spawns the first game picker to get started.
        """
        self.load_game()
        clock = pygame.time.Clock()

        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)

            if self.cpu.draw_flag:
                self.draw_to_display()
            self.update_sound()
            self.report_halt()
            clock.tick(FRAME_RATE)

        self.toggle_all_timers(False)
        self.stop_sound()
        pygame.quit()
    # endregion

    # region Timers
    def run_opcode_cycle(self) -> None:
        """
        Execute one instruction and schedule the next, unless the interpreter halted.  Does nothing once the game is
        stopped, as a cycle may already be on its way when the timer is cancelled.
        """
        with self.lock:
            if not self.game_loaded:
                return
            state = self.cpu.step()
        if state != CpuState.HALTED:
            self.toggle_opcode_timer(True)

    def run_timer_tick(self) -> None:
        """
        Tick the delay and sound timers and schedule the next tick.
        """
        with self.lock:
            if not self.game_loaded:
                return
            self.cpu.tick()
        self.toggle_tick_timer(True)

    def toggle_all_timers(self, status: bool) -> None:
        """
        Start / stop all timers.
        :param status: True if the timers should be started, False otherwise.
        """
        self.toggle_opcode_timer(status)
        self.toggle_tick_timer(status)

    def toggle_opcode_timer(self, status: bool) -> None:
        """
        Start / stop the opcode timer.
        :param status: True if the timer should be started, False otherwise.
        """
        if self.opcode_timer:
            self.opcode_timer.cancel()

        if status:
            self.opcode_timer = threading.Timer(OPCODE_DELAY, self.run_opcode_cycle)
            self.opcode_timer.daemon = True
            self.opcode_timer.start()

    def toggle_tick_timer(self, status: bool) -> None:
        """
        Start / stop the 60Hz timer tick.
        :param status: True if the timer should be started, False otherwise.
        """
        if self.tick_timer:
            self.tick_timer.cancel()

        if status:
            self.tick_timer = threading.Timer(TIMER_DELAY, self.run_timer_tick)
            self.tick_timer.daemon = True
            self.tick_timer.start()
    # endregion


def main() -> None:
    # Set up the logging
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s]:  %(message)s", stream=sys.stdout)
    logging.getLogger("chip8").setLevel(logging.DEBUG if "pydevd" in sys.modules else logging.WARNING)

    frontend = Frontend()
    frontend.event_loop()


if __name__ == "__main__":
    main()
