"""Filter namespace: the whole filter library under one name.

Example:
    from apifilter import Filter

    non_deprecated = Filter.invert(Filter.DEPRECATED)
    visible = Filter.all_of(non_deprecated, Filter.has_security("None"))
    members = [m for m in dump if visible(m)]
"""

from __future__ import annotations

from apifilter.infrastructure.filters import (
    DEPRECATED,
    READ_ONLY,
    READABLE,
    REPLICATED,
    SCRIPTABLE,
    SERVICE,
    THREAD_SAFE,
    WRITABLE,
    YIELDS,
    all_of,
    any_of,
    has_name,
    has_security,
    has_tags,
    has_value_type,
    invert,
    is_member_type,
)


class Filter:
    """Namespace of filter constructors and flag filters.

    Holds no state. Constructors are the functions of
    apifilter.infrastructure.filters, exposed as static methods.
    """

    __slots__ = ()

    has_tags = staticmethod(has_tags)
    has_security = staticmethod(has_security)
    invert = staticmethod(invert)
    is_member_type = staticmethod(is_member_type)
    has_name = staticmethod(has_name)
    any_of = staticmethod(any_of)
    all_of = staticmethod(all_of)
    has_value_type = staticmethod(has_value_type)

    DEPRECATED = staticmethod(DEPRECATED)
    READ_ONLY = staticmethod(READ_ONLY)
    REPLICATED = staticmethod(REPLICATED)
    SCRIPTABLE = staticmethod(SCRIPTABLE)
    YIELDS = staticmethod(YIELDS)
    THREAD_SAFE = staticmethod(THREAD_SAFE)
    READABLE = staticmethod(READABLE)
    WRITABLE = staticmethod(WRITABLE)
    SERVICE = staticmethod(SERVICE)

    def __new__(cls) -> Filter:
        raise TypeError("Filter is a namespace and cannot be instantiated")
