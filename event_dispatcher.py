# event_dispatcher.py

from collections import defaultdict
import re
import traceback
from typing import Any, Callable, Dict, List, Optional
from loggers import EventLogger

class Event:
    """
    Represents an event with type, data, and metadata.
    """

    def __init__(self, event_type: str, data: Any = None, metadata: Optional[Dict[str, Any]] = None):
        """
        Initializes an Event instance.

        Args:
            event_type (str): The type of the event, using colon-separated namespacing.
            data (Any, optional): The data associated with the event.
            metadata (Dict[str, Any], optional): Additional metadata for the event.
        """
        self.event_type = event_type
        self.data = data if data is not None else {}
        self.metadata = metadata or {}

    def __eq__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return (self.event_type, self.data, self.metadata) == (other.event_type, other.data, other.metadata)

    def __repr__(self):
        return f"Event({self.event_type!r}, {self.data!r})"

class EventDispatcher:
    """
    Manages event listeners, dispatching, and listener prioritization.
    """

    def __init__(self):
        """
        Initializes the EventDispatcher.
        """
        self.listeners: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.wildcard_listeners: List[Dict[str, Any]] = []

    def add_listener(self, event_type: str, callback: Callable, priority: int = 0) -> None:
        """
        Adds a listener for a specific event type.

        Args:
            event_type (str): The event type to listen for. Can include wildcards (*).
            callback (Callable): The function to call when the event is dispatched.
            priority (int, optional): The priority of the listener. Higher priority listeners are called first.
        """
        listener = {"callback": callback, "priority": priority}
        if '*' in event_type:
            self.wildcard_listeners.append({
                "pattern": re.compile(event_type.replace('*', '.*')),
                **listener
            })
        else:
            self.listeners[event_type].append(listener)
            self.listeners[event_type].sort(key=lambda x: x["priority"], reverse=True)

    def remove_listener(self, event_type: str, callback: Callable) -> None:
        """
        Removes a listener for a specific event type.

        Args:
            event_type (str): The event type to remove the listener from.
            callback (Callable): The callback function to remove.
        """
        if '*' in event_type:
            self.wildcard_listeners = [l for l in self.wildcard_listeners if l["callback"] != callback]
        else:
            self.listeners[event_type] = [l for l in self.listeners[event_type] if l["callback"] != callback]

    def clear(self) -> None:
        """Removes every registered listener."""
        self.listeners.clear()
        self.wildcard_listeners = []

    def _get_listeners(self, event: Event) -> List[Dict[str, Any]]:
        """
        Returns the list of listeners that match the event, including wildcard matches,
        sorted by priority (highest first).
        """
        listeners_to_call = self.listeners[event.event_type].copy()
        listeners_to_call.extend(
            [l for l in self.wildcard_listeners if l["pattern"].match(event.event_type)]
        )
        listeners_to_call.sort(key=lambda x: x["priority"], reverse=True)
        return listeners_to_call

    def dispatch_event(self, event: Event) -> None:
        """
        Synchronously dispatches an event to all registered listeners.

        A failing listener is logged and skipped; the remaining listeners still run.
        """
        EventLogger.log_event_dispatch(event.event_type, event.data, event.metadata)
        for listener in self._get_listeners(event):
            try:
                listener["callback"](event)
            except Exception as e:
                EventLogger.error(
                    f"Error in event listener for {event.event_type}\n"
                    f"  Listener Callback: {listener['callback']}\n"
                    f"  Error Type: {type(e).__name__}\n"
                    f"  Error Message: {e}\n"
                    f"{traceback.format_exc()}"
                )

# Global event dispatcher instance
global_event_dispatcher = EventDispatcher()
