"""
Console presentation for pet events.

The core only produces Event objects; this module turns them into the text the
player reads, and prints it with rich.
"""

from typing import Optional

from rich.console import Console

from event_dispatcher import Event, EventDispatcher
from shared_models.pet_models import StatusSnapshot

MESSAGES = {
    "pet:created": "\nWelcome {name} the {pet_type}! Your new pet is ready.\n",
    "action:feed:started": "\nYou feed {name}.",
    "action:feed:minimal": "{name} is already full and eats only a little.",
    "action:feed:satisfied": "{name} seems satisfied.",
    "action:play:started": "\nYou try to play with {name}.",
    "action:play:too_hungry": "{name} is too hungry to play and wants food first.",
    "action:play:too_weak": "{name} is too weak to play. Rest first.",
    "action:play:fun": "{name} had fun! Happiness increased.",
    "action:rest:rested": "\n{name} rests for a while.",
    "tick:hour_passed": "(One hour has passed.)",
    "tick:starving": "Warning: {name} is starving. Health will drop if you don't feed soon.",
    "tick:unhappy": "Warning: {name} is very unhappy. Health suffers from long-term sadness.",
    "tick:treat_found": "{name} found a hidden treat and got happier!",
    "tick:critical:hunger": "CRITICAL: Hunger = {value}/10. Feed {name} soon!",
    "tick:critical:happiness": "CRITICAL: Happiness = {value}/10.",
    "tick:critical:health": "CRITICAL: Health = {value}/10.",
    "pet:died": "\nSadly, {name} has passed away due to poor health. Game over.",
}

STYLES = {
    "tick:starving": "yellow",
    "tick:unhappy": "yellow",
    "tick:treat_found": "green",
    "pet:died": "bold red",
}


class EventRenderer:
    """Maps events to display text."""

    def render(self, event: Event) -> str:
        if event.event_type == "status:snapshot":
            return self.render_status(StatusSnapshot.model_validate(event.data))
        template = MESSAGES.get(event.event_type)
        if template is None:
            return ""
        return template.format(**event.data)

    def render_status(self, snapshot: StatusSnapshot) -> str:
        lines = ["----- Pet Status -----", f"{'Name':9}: {snapshot.name} the {snapshot.pet_type}"]
        for reading in snapshot.stats.values():
            lines.append(f"{reading.label:9}: {reading.value}/{reading.max_value}  {reading.annotation}".rstrip())
        lines.append("----------------------")
        return "\n".join(lines)

    def style_for(self, event: Event) -> Optional[str]:
        if event.event_type.startswith("tick:critical:"):
            return "bold red"
        return STYLES.get(event.event_type)


class ConsoleView:
    """
    Prints rendered events. Attach to a dispatcher to follow a session live.
    """

    def __init__(self, console: Optional[Console] = None, renderer: Optional[EventRenderer] = None):
        self.console = console if console is not None else Console(highlight=False)
        self.renderer = renderer if renderer is not None else EventRenderer()

    def show(self, event: Event) -> None:
        text = self.renderer.render(event)
        if not text:
            return
        self.console.print(text, style=self.renderer.style_for(event), markup=False, highlight=False)

    def attach(self, dispatcher: EventDispatcher) -> None:
        dispatcher.add_listener("*", self.show)

    def detach(self, dispatcher: EventDispatcher) -> None:
        dispatcher.remove_listener("*", self.show)
