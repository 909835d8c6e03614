from typing import List, Optional

KEY_COUNT = 16


class Keypad:
    """
    The state of the 16 keys.  The state seen at the end of the previous instruction is latched so that a fresh press can be told apart from a held key.
    """
    def __init__(self):
        self.keys: List[bool] = [False] * KEY_COUNT
        self.previous_keys: List[bool] = [False] * KEY_COUNT

    def reset(self) -> None:
        self.keys = [False] * KEY_COUNT
        self.previous_keys = [False] * KEY_COUNT

    @staticmethod
    def check_key(key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"Key {key} is not on the keypad.")

    def set_key(self, key: int, pressed: bool) -> None:
        """
        Record the state of a key.
        :param key: The key, 0-f.
        :param pressed: True if the key is held down, False otherwise.
        """
        self.check_key(key)
        self.keys[key] = pressed

    def is_pressed(self, key: int) -> bool:
        self.check_key(key)
        return self.keys[key]

    def release_all(self) -> None:
        self.keys = [False] * KEY_COUNT

    def newly_pressed(self) -> Optional[int]:
        """
        Find a key which went down since the last latch.
        :return: The lowest such key, None if there is none.
        """
        for key in range(KEY_COUNT):
            if self.keys[key] and not self.previous_keys[key]:
                return key
        return None

    def latch(self) -> None:
        """
        Remember the current key states for the next press detection.
        """
        self.previous_keys = list(self.keys)
