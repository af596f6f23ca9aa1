r"""Load the YAML topic map that drives the documentation sidebar.

The topic map lists the site's top-level navigation entries in display order.
Each entry is either a direct link to a page or a collapsible group whose
sub-topics live under a shared directory:

.. code-block:: yaml

    Topics:
      - Name: Intro
        File: intro
      - Name: Guides
        Dir: guides
        Topics:
          - Name: Setup
            File: setup

The loader is deliberately uncached. The map is read fresh for each render so
edits show up on the next page without restarting the build.

Examples
--------
>>> from pathlib import Path
>>> from minishift_docs.topic_map import load_topic_map
>>> topic_map = load_topic_map(Path("build/_topic_map.yml"))  # doctest: +SKIP
>>> [topic.name for topic in topic_map.topics]  # doctest: +SKIP
['Intro', 'Guides']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:
    from pathlib import Path

TOPICS_KEY = "Topics"


class TopicMapError(ValueError):
    """Raised when the topic map cannot be turned into navigation entries."""


class TopicMapParseError(TopicMapError):
    """Raised when the topic map is malformed or missing required fields."""


class TopicGroupError(TopicMapError, LookupError):
    """Raised when a topic mixes direct-link and group fields."""


@dc.dataclass(slots=True)
class SubTopic:
    """Leaf navigation entry nested under a grouped topic."""

    name: str
    file: str

    def url(self, directory: str) -> str:
        """Return the canonical page URL under ``directory``."""
        return f"/{directory}/{self.file}.html"


@dc.dataclass(slots=True)
class Topic:
    """Top-level navigation entry.

    Attributes
    ----------
    name : str
        Display label.
    file : str or None
        Target document for direct-link topics.
    directory : str or None
        Directory that holds the sub-topics; set only for groups.
    topics : list[SubTopic]
        Ordered sub-topics; empty for direct-link topics.
    """

    name: str
    file: str | None = None
    directory: str | None = None
    topics: list[SubTopic] = dc.field(default_factory=list)

    @property
    def is_group(self) -> bool:
        """Return True when the topic renders as a collapsible group."""
        return self.directory is not None

    @property
    def url(self) -> str:
        """Return the link target of a direct-link topic."""
        if self.file is None:
            msg = f"Topic '{self.name}' has no 'File' to link to."
            raise TopicGroupError(msg)
        return f"/{self.file}.html"


@dc.dataclass(slots=True)
class TopicMap:
    """Ordered collection of top-level topics."""

    topics: list[Topic]

    def __len__(self) -> int:
        return len(self.topics)


def load_topic_map(path: Path) -> TopicMap:
    """Read and validate the topic map stored at ``path``.

    Parameters
    ----------
    path : Path
        Location of the topic map YAML document.

    Returns
    -------
    TopicMap
        Topics in declaration order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TopicMapParseError
        If the YAML is malformed, the top level is not a mapping, or the
        ``Topics`` field or a required entry field is missing.
    TopicGroupError
        If a topic declares ``Dir`` without sub-topics, sub-topics without
        ``Dir``, or neither ``Dir`` nor ``File``.
    """
    if not path.exists():
        msg = f"Topic map '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except YAMLError as exc:
        msg = f"Topic map '{path}' is not valid YAML: {exc}"
        raise TopicMapParseError(msg) from exc
    return parse_topic_map(loaded, source=str(path))


def parse_topic_map(payload: object, *, source: str = "<topic map>") -> TopicMap:
    """Build a :class:`TopicMap` from an already-decoded YAML payload."""
    if not isinstance(payload, dict):
        msg = f"Topic map '{source}' must be a mapping with a '{TOPICS_KEY}' field."
        raise TopicMapParseError(msg)
    entries = payload.get(TOPICS_KEY)
    if entries is None:
        msg = f"Topic map '{source}' is missing the '{TOPICS_KEY}' field."
        raise TopicMapParseError(msg)
    if not isinstance(entries, list):
        msg = f"'{TOPICS_KEY}' in '{source}' must be a list."
        raise TopicMapParseError(msg)
    return TopicMap(
        topics=[_build_topic(entry, index) for index, entry in enumerate(entries)]
    )


def _build_topic(entry: object, index: int) -> Topic:
    """Validate one top-level entry and convert it into a Topic."""
    if not isinstance(entry, dict):
        msg = f"Topic #{index} must be a mapping."
        raise TopicMapParseError(msg)
    name = _required_text(entry, "Name", f"Topic #{index}")
    file = _optional_text(entry, "File", f"Topic '{name}'")
    directory = _optional_text(entry, "Dir", f"Topic '{name}'")
    raw_topics = entry.get(TOPICS_KEY)

    if directory is None:
        if raw_topics:
            msg = f"Topic '{name}' lists sub-topics but has no 'Dir'."
            raise TopicGroupError(msg)
        if file is None:
            msg = f"Topic '{name}' needs either 'File' or 'Dir' with sub-topics."
            raise TopicGroupError(msg)
        return Topic(name=name, file=file)

    if not raw_topics:
        msg = f"Topic group '{name}' declares 'Dir' but has no sub-topics."
        raise TopicGroupError(msg)
    if not isinstance(raw_topics, list):
        msg = f"Sub-topics of '{name}' must be a list."
        raise TopicMapParseError(msg)

    subtopics: list[SubTopic] = []
    for position, raw in enumerate(raw_topics):
        where = f"Sub-topic #{position} of '{name}'"
        if not isinstance(raw, dict):
            msg = f"{where} must be a mapping."
            raise TopicMapParseError(msg)
        subtopics.append(
            SubTopic(
                name=_required_text(raw, "Name", where),
                file=_required_text(raw, "File", where),
            )
        )
    return Topic(name=name, file=file, directory=directory, topics=subtopics)


def _required_text(entry: typ.Mapping[str, object], key: str, where: str) -> str:
    """Return ``entry[key]`` as text, raising when it is absent or blank."""
    value = _optional_text(entry, key, where)
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise TopicMapParseError(msg)
    return value


def _optional_text(
    entry: typ.Mapping[str, object], key: str, where: str
) -> str | None:
    """Return ``entry[key]`` stripped, or None when absent or blank.

    Scalars are coerced to text; mappings and lists are rejected.
    """
    value = entry.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        msg = f"{where} has a non-scalar '{key}': {value!r}."
        raise TopicMapParseError(msg)
    text = str(value).strip()
    return text or None


__all__ = [
    "SubTopic",
    "Topic",
    "TopicGroupError",
    "TopicMap",
    "TopicMapError",
    "TopicMapParseError",
    "load_topic_map",
    "parse_topic_map",
]
