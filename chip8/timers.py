import logging

logger = logging.getLogger(__name__)

TIMER_MAX = 255


class Timers:
    """
    The delay and sound timers.  Both count down by one on every tick until they reach 0; the caller is expected to tick at 60Hz.
    """
    def __init__(self):
        self.delay = 0
        self.sound = 0

    def reset(self) -> None:
        self.delay = 0
        self.sound = 0

    def tick(self) -> None:
        """
        Decrement each timer which has not already run out.
        """
        if self.delay > 0:
            self.delay -= 1
            logger.debug(f"Delay timer decremented, new value is {self.delay}.")
        if self.sound > 0:
            self.sound -= 1
            logger.debug(f"Sound timer decremented, new value is {self.sound}.")

    def delay_value(self) -> int:
        return self.delay

    def set_delay(self, value: int) -> None:
        self.delay = value & TIMER_MAX

    def sound_value(self) -> int:
        return self.sound

    def set_sound(self, value: int) -> None:
        self.sound = value & TIMER_MAX

    def sound_active(self) -> bool:
        """
        Whether the beep should currently be playing.
        """
        return self.sound > 0
