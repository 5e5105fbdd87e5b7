# modules/actions/__init__.py

from .action import Action, ActionType
from .feed import FeedAction
from .play import PlayAction
from .rest import RestAction
from .status import StatusAction
from .action_manager import ActionManager
