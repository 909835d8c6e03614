import time

import pygame
import pytest

from unittest import mock

from chip8 import frontend
from chip8.cpu import CPU
from chip8.frontend import Frontend, KEY_LOOKUP, OPCODE_DELAY
from chip8.memory import GAME_START_ADDRESS, MEMORY_SIZE


@pytest.fixture
def window():
    with mock.patch.object(frontend.pygame, "mixer"), \
            mock.patch.object(frontend.pygame, "sndarray"), \
            mock.patch.object(frontend.pygame, "display"), \
            mock.patch.object(frontend.pygame, "surfarray"), \
            mock.patch.object(frontend.pygame, "transform"), \
            mock.patch.object(frontend.pygame, "Surface"), \
            mock.patch.object(frontend.pygame, "init"):
        yield Frontend(CPU())


class TestKeys:
    def test_key_lookup_covers_keypad(self):
        assert sorted(KEY_LOOKUP.values()) == list(range(16)), "Not every key on the keypad is mapped."

    def test_key_down_and_up(self, window):
        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1))
        assert window.cpu.keypad.is_pressed(1), "Key press not passed to the keypad."

        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_v))
        assert window.cpu.keypad.is_pressed(15), "Key press not passed to the keypad."

        window.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_1))
        assert not window.cpu.keypad.is_pressed(1), "Key release not passed to the keypad."
        assert window.cpu.keypad.is_pressed(15), "Wrong key released."

    def test_unmapped_key(self, window):
        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
        assert not any(window.cpu.keypad.keys), "Unmapped key changed the keypad."

    def test_focus_lost_releases_keys(self, window):
        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c))
        window.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
        assert not any(window.cpu.keypad.keys), "Keys still held after the window lost focus."

    def test_quit(self, window):
        window.handle_event(pygame.event.Event(pygame.QUIT))
        assert not window.running, "Quit event did not stop the event loop."

    @mock.patch.object(Frontend, "load_game")
    def test_load_key(self, mock_method, window):
        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_l))
        mock_method.assert_called_once_with()

        window.selecting_game = True
        window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_l))
        mock_method.assert_called_once_with()


class TestSound:
    def test_tone(self):
        with mock.patch.object(frontend.pygame, "sndarray") as sndarray:
            frontend.make_tone()
        wave = sndarray.make_sound.call_args[0][0]
        assert wave.shape == (frontend.SOUND_FREQUENCY,), "Tone should last one second."
        assert set(wave.tolist()) == {frontend.SOUND_AMPLITUDE, -frontend.SOUND_AMPLITUDE}, "Tone is not a square wave."

    def test_follows_sound_timer(self, window):
        window.update_sound()
        window.sound_player.play.assert_not_called()

        window.cpu.timers.set_sound(2)
        window.update_sound()
        window.update_sound()
        window.sound_player.play.assert_called_once_with(-1)

        window.cpu.tick()
        window.cpu.tick()
        window.update_sound()
        window.sound_player.stop.assert_called()
        assert not window.sound_playing, "Sound still marked as playing."


class TestTimers:
    def test_opcode_cycle(self, window):
        window.cpu.load_program(bytes.fromhex("6007"))
        window.game_loaded = True
        with mock.patch.object(Frontend, "toggle_opcode_timer") as toggle:
            window.run_opcode_cycle()
        assert window.cpu.registers.get(0) == 7, "Instruction not executed."
        toggle.assert_called_once_with(True)

    def test_opcode_cycle_stops_on_halt(self, window):
        window.cpu.load_program(bytes.fromhex("00ee"))
        window.game_loaded = True
        with mock.patch.object(Frontend, "toggle_opcode_timer") as toggle:
            window.run_opcode_cycle()
        assert window.cpu.is_halted, "Interpreter did not halt."
        toggle.assert_not_called()

    def test_timer_tick(self, window):
        window.cpu.timers.set_delay(5)
        window.game_loaded = True
        with mock.patch.object(Frontend, "toggle_tick_timer") as toggle:
            window.run_timer_tick()
        assert window.cpu.timers.delay_value() == 4, "Timers not ticked."
        toggle.assert_called_once_with(True)

    def test_timer_tick_stopped_game(self, window):
        window.cpu.timers.set_delay(5)
        with mock.patch.object(Frontend, "toggle_tick_timer") as toggle:
            window.run_timer_tick()
        assert window.cpu.timers.delay_value() == 5, "Timers ticked without a game running."
        toggle.assert_not_called()

    def test_cycle_after_reset_does_nothing(self, window):
        window.cpu.load_program(bytes.fromhex("1200"))
        window.game_loaded = True
        with mock.patch.object(Frontend, "toggle_opcode_timer") as toggle:
            window.reset()
            window.run_opcode_cycle()
        assert window.cpu.registers.program_counter == GAME_START_ADDRESS, "Interpreter stepped after a reset."
        assert mock.call(True) not in toggle.call_args_list, "Next instruction scheduled after a reset."

    def test_scheduled_cycle_after_stop_does_nothing(self, window):
        window.cpu.load_program(bytes.fromhex("1200"))
        window.game_loaded = True
        window.toggle_all_timers(False)
        # A cycle already running when the timers were cancelled schedules one more.
        window.run_opcode_cycle()
        with window.lock:
            window.game_loaded = False
            window.cpu.reset()
        time.sleep(OPCODE_DELAY * 50)
        window.toggle_all_timers(False)
        assert window.cpu.registers.program_counter == GAME_START_ADDRESS, "Interpreter stepped after the game stopped."


class TestLoadGame:
    @mock.patch.object(Frontend, "toggle_all_timers")
    @mock.patch.object(frontend.easygui, "msgbox")
    @mock.patch.object(frontend.easygui, "fileopenbox")
    def test_load(self, fileopenbox, msgbox, toggle, window, tmp_path):
        rom = tmp_path / "maze.ch8"
        rom.write_bytes(bytes.fromhex("a21e"))
        fileopenbox.return_value = str(rom)

        window.load_game()
        msgbox.assert_not_called()
        assert window.game_loaded, "Game not marked as loaded."
        assert window.cpu.memory.read(GAME_START_ADDRESS) == 0xa2, "Game not copied into memory."
        toggle.assert_called_once_with(True)

    @mock.patch.object(Frontend, "toggle_all_timers")
    @mock.patch.object(frontend.easygui, "msgbox")
    @mock.patch.object(frontend.easygui, "fileopenbox")
    def test_too_large(self, fileopenbox, msgbox, toggle, window, tmp_path):
        rom = tmp_path / "huge.ch8"
        rom.write_bytes(bytes([1]) * (MEMORY_SIZE - GAME_START_ADDRESS + 1))
        fileopenbox.return_value = str(rom)

        window.load_game()
        msgbox.assert_called_once()
        assert not window.game_loaded, "Game marked as loaded despite not fitting."
        assert window.cpu.memory.read(GAME_START_ADDRESS) == 0, "Memory modified by a game which did not fit."
        toggle.assert_not_called()

    @mock.patch.object(frontend.easygui, "msgbox")
    @mock.patch.object(frontend.easygui, "fileopenbox", return_value=None)
    def test_nothing_selected(self, fileopenbox, msgbox, window):
        window.load_game()
        msgbox.assert_called_once()
        assert not window.game_loaded, "Game marked as loaded without one being picked."

    @mock.patch.object(frontend.easygui, "msgbox")
    @mock.patch.object(frontend.easygui, "fileopenbox")
    def test_missing_file(self, fileopenbox, msgbox, window, tmp_path):
        fileopenbox.return_value = str(tmp_path / "missing.ch8")
        window.load_game()
        msgbox.assert_called_once()
        assert not window.game_loaded, "Game marked as loaded from a missing file."


class TestHalt:
    @mock.patch.object(frontend.easygui, "msgbox")
    def test_reported_once(self, msgbox, window):
        window.cpu.load_program(bytes.fromhex("00ee"))
        window.cpu.step()

        window.report_halt()
        window.report_halt()
        msgbox.assert_called_once()
        assert "stack" in msgbox.call_args[0][0], "Halt reason not shown."

    @mock.patch.object(frontend.easygui, "msgbox")
    def test_not_reported_while_running(self, msgbox, window):
        window.report_halt()
        msgbox.assert_not_called()
