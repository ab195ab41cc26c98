"""
Shared pytest fixtures for the docbot test suite.

Indexes are built from the sample corpus in tests.factories, either in
memory or as real zip archives under tmp_path.

Usage in tests:
    def test_lookup(jdk):
        assert jdk.lookup("ArrayList").info is not None

    def test_bot(bot, clock):
        bot.handle(ChatMessage("=javadoc List"))
        clock.advance(31)
"""

import pytest

from docbot.bot import create_bot
from docbot.config import Config, ConfigManager
from docbot.core.index import MemoryIndex
from tests.factories import DocTestFactory, FakeClock, jdk_index, records, UTIL_LIST, OBJECT, COLLECTION


@pytest.fixture
def jdk():
    """In-memory index over the whole sample corpus (java.awt.List included)."""
    return jdk_index()


@pytest.fixture
def util_only():
    """
    Index where "List" is unambiguous.

    Contains java.util.List, java.util.Collection and java.lang.Object.
    """
    return MemoryIndex(records(UTIL_LIST, COLLECTION, OBJECT))


@pytest.fixture
def clock():
    """Manually advanced clock for choice timeouts."""
    return FakeClock()


@pytest.fixture
def bot(jdk, clock):
    """Bot over the sample corpus with default settings and a fake clock."""
    return create_bot(jdk, Config(), clock=clock)


@pytest.fixture
def doc_factory(tmp_path):
    """
    Create an empty DocTestFactory.

    Example:
        def test_archive(doc_factory):
            doc_factory.write_archive("jdk", JDK, library=JDK_LIBRARY)
            index = doc_factory.archive_index()
    """
    return DocTestFactory(tmp_path)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """
    ConfigManager whose user and project files live under tmp_path.

    DOCBOT_* environment overrides are cleared.
    """
    for key in ConfigManager.ENV_OVERRIDES:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_DIR", tmp_path / "home" / ".docbot")
    project = tmp_path / "project"
    project.mkdir()
    return ConfigManager(project)

