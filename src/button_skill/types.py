"""
button_skill.types — TypedDict schemas for raw device payloads
==============================================================

Documents the plain-dict structures that cross the device boundary
without a pydantic model: the raw input events inside an input handler
report, and the recognizer/event specs of a StartInputHandler.

    from button_skill import InputEvent

Use __annotations__ to inspect fields:

    >>> InputEvent.__annotations__
    {'gadgetId': str, 'timestamp': str, 'action': str, 'color': str, 'feature': str}
"""

from typing import Dict, List, Literal, TypedDict


class InputEvent(TypedDict, total=False):
    """One raw button event inside a reported input handler event.

    Fields
    ------
    gadgetId : str
        Id of the button that produced the event.
    timestamp : str
        ISO 8601 time the device recorded the event.
    action : str
        "down", "up" or "silence".
    color : str
        Hex color the button showed at the time.
    feature : str
        Always "press" for Echo Buttons.
    """
    gadgetId: str
    timestamp: str
    action: Literal["down", "up", "silence"]
    color: str
    feature: str


class PatternStep(TypedDict, total=False):
    """One step of a match recognizer pattern."""
    gadgetIds: List[str]
    colors: List[str]
    action: Literal["down", "up", "silence"]


class RecognizerSpec(TypedDict, total=False):
    """A recognizer in StartInputHandler "recognizers".

    Fields
    ------
    type : str
        "match", "deviation" or "progress".
    fuzzy : bool
        Whether other events may appear between pattern steps.
    anchor : str
        "start", "end" or "anywhere".
    pattern : List[PatternStep]
        Steps that must be observed in order.
    """
    type: Literal["match", "deviation", "progress"]
    fuzzy: bool
    anchor: Literal["start", "end", "anywhere"]
    pattern: List[PatternStep]


class EventSpec(TypedDict, total=False):
    """An event in StartInputHandler "events".

    Fields
    ------
    meets : List[str]
        Recognizers that must all be true; "timed out" is built in.
    fails : List[str]
        Recognizers that must all be false.
    reports : str
        "history", "matches" or "nothing".
    shouldEndInputHandler : bool
        Whether firing this event closes the input handler.
    maximumInvocations : int
        How many times the event may fire.
    """
    meets: List[str]
    fails: List[str]
    reports: Literal["history", "matches", "nothing"]
    shouldEndInputHandler: bool
    maximumInvocations: int


Recognizers = Dict[str, RecognizerSpec]
Events = Dict[str, EventSpec]
