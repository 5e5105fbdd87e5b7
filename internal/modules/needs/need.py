# modules/needs/need.py

from config import Config


class Need:
    """
    Describes one pet stat: its label, and when it counts as critical.
    """

    def __init__(self, name, label, critical_threshold, critical_when_high=True, annotation="",
                 max_value=Config.STAT_MAX):
        """
        Initializes a Need instance.

        Args:
            name (str): The attribute name on PetState (e.g., 'hunger').
            label (str): Display label (e.g., 'Hunger').
            critical_threshold (int): Value at which the need becomes critical.
            critical_when_high (bool, optional): True if values at or above the threshold
                are critical, False if values at or below it are.
            annotation (str, optional): Short note shown beside a critical value.
            max_value (int, optional): The maximum value the need can have.
        """
        self.name = name
        self.label = label
        self.critical_threshold = critical_threshold
        self.critical_when_high = critical_when_high
        self.annotation = annotation
        self.max_value = max_value

    def value_of(self, state):
        return getattr(state, self.name)

    def is_critical(self, value):
        """
        Checks a value against this need's critical threshold.

        Args:
            value (int): The stat value to check.

        Returns:
            bool: True if the value is critical.
        """
        if self.critical_when_high:
            return value >= self.critical_threshold
        return value <= self.critical_threshold
