# Copyright 2014-present MongoDB, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tags a replica set member advertises, used to steer server selection."""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple, Union

from clustermon.common import validate_string
from clustermon.errors import InvalidArgument


class Tag:
    """One name/value pair."""

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: str) -> None:
        self._name = validate_string("name", name)
        if not isinstance(value, str):
            raise TypeError(f"Wrong type for value of tag {name!r}, value must be a string")
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Tag):
            return self._name == other.name and self._value == other.value
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self._name, self._value))

    def __repr__(self) -> str:
        return f"Tag({self._name!r}, {self._value!r})"


_TagsInput = Union[Mapping[str, str], Iterable[Union[Tag, Tuple[str, str]]]]


class TagSet:
    """Immutable set of :class:`Tag` instances with unique names.

    A tag set can be built from a mapping like ``{"dc": "ny"}`` or from an
    iterable of :class:`Tag` instances or ``(name, value)`` pairs. Order is
    not significant for equality: ``TagSet({"a": "1", "b": "2"})`` equals
    ``TagSet([("b", "2"), ("a", "1")])``.

    The empty tag set matches any server, see :meth:`contains_all`.
    """

    __slots__ = ("_tags", "_key")

    def __init__(self, tags: Optional[_TagsInput] = None) -> None:
        if tags is None:
            tags = ()
        elif isinstance(tags, Mapping):
            tags = tags.items()
        by_name: Dict[str, Tag] = {}
        for item in tags:
            tag = item if isinstance(item, Tag) else Tag(*item)
            existing = by_name.get(tag.name)
            if existing is not None and existing != tag:
                raise InvalidArgument(f"Tag set contains conflicting values for {tag.name!r}")
            by_name[tag.name] = tag
        self._tags: Tuple[Tag, ...] = tuple(by_name[name] for name in sorted(by_name))
        self._key: FrozenSet[Tag] = frozenset(self._tags)

    @property
    def tags(self) -> Tuple[Tag, ...]:
        """The tags, sorted by name."""
        return self._tags

    def contains_all(self, other: TagSet) -> bool:
        """True if every tag in ``other`` is also in this set.

        A server tagged ``{'a': '1', 'b': '2'}`` contains all of the tag set
        ``{'a': '1'}``.
        """
        return self._key.issuperset(other._key)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for tag in self._tags:
            if tag.name == name:
                return tag.value
        return default

    def to_dict(self) -> Dict[str, str]:
        return {tag.name: tag.value for tag in self._tags}

    def __contains__(self, tag: object) -> bool:
        return tag in self._key

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, TagSet):
            return self._key == other._key
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"TagSet({self.to_dict()!r})"
