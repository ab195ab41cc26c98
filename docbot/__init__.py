"""
docbot — Javadoc lookups for chat rooms

Answers "=javadoc String#indexOf" with the documentation of the entry.
Ambiguous queries get a numbered list; reply with a number to pick.

Usage:
    docbot chat
    docbot query "java.util.List#add(Object)"
    docbot classes java.util
    docbot config
"""

__version__ = "0.1.0"

# Core layer (lookup engine)
from .core.models import ClassName, ParameterInfo, MethodInfo, LibraryInfo, ClassInfo
from .core.query import ClassReference, parse_query
from .core.index import DocumentationIndex, LookupStatus, LookupResult, MemoryIndex
from .core.archive import LibraryArchive, ArchiveIndex
from .core.methods import MatchSet, MethodResolver
from .core.resolver import AmbiguityResolver, Resolution, ResolutionKind

# Tracking layer
from .tracking.choices import ChoiceTracker, ChoiceStatus, ChoiceOutcome

# Presentation layer
from .presentation.paragraphs import Paragraphs, render_paragraph
from .presentation.composer import ResponseComposer

# Chat surface
from .chat.message import ChatMessage, ChatResponse, SplitStrategy
from .bot import Bot, create_bot

# Config (stays at root)
from .config import Config, ConfigManager, get_config
from .errors import DocbotError, DocumentationError, MultipleClassesFoundError

__all__ = [
    # Core
    'ClassName', 'ParameterInfo', 'MethodInfo', 'LibraryInfo', 'ClassInfo',
    'ClassReference', 'parse_query',
    'DocumentationIndex', 'LookupStatus', 'LookupResult', 'MemoryIndex',
    'LibraryArchive', 'ArchiveIndex',
    'MatchSet', 'MethodResolver',
    'AmbiguityResolver', 'Resolution', 'ResolutionKind',
    # Tracking
    'ChoiceTracker', 'ChoiceStatus', 'ChoiceOutcome',
    # Presentation
    'Paragraphs', 'render_paragraph', 'ResponseComposer',
    # Chat
    'ChatMessage', 'ChatResponse', 'SplitStrategy', 'Bot', 'create_bot',
    # Config
    'Config', 'ConfigManager', 'get_config',
    'DocbotError', 'DocumentationError', 'MultipleClassesFoundError',
]
