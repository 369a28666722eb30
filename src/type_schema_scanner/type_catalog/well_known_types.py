"""Platform types that are assumed to exist without a catalog entry."""

from __future__ import annotations

COLLECTION_INTERFACE_NAME = "java.util.Collection"
MAP_INTERFACE_NAME = "java.util.Map"
ENUM_CLASS_NAME = "java.lang.Enum"

# Direct supertypes of well-known platform types; walked transitively.
PLATFORM_SUPERTYPES: dict[str, tuple[str, ...]] = {
    "java.lang.Iterable": (),
    COLLECTION_INTERFACE_NAME: ("java.lang.Iterable",),
    "java.util.List": (COLLECTION_INTERFACE_NAME,),
    "java.util.Set": (COLLECTION_INTERFACE_NAME,),
    "java.util.Queue": (COLLECTION_INTERFACE_NAME,),
    "java.util.Deque": ("java.util.Queue",),
    "java.util.SortedSet": ("java.util.Set",),
    "java.util.NavigableSet": ("java.util.SortedSet",),
    "java.util.AbstractCollection": (COLLECTION_INTERFACE_NAME,),
    "java.util.AbstractList": ("java.util.AbstractCollection", "java.util.List"),
    "java.util.ArrayList": ("java.util.AbstractList", "java.util.List"),
    "java.util.LinkedList": ("java.util.AbstractList", "java.util.List", "java.util.Deque"),
    "java.util.Vector": ("java.util.AbstractList", "java.util.List"),
    "java.util.HashSet": ("java.util.Set",),
    "java.util.LinkedHashSet": ("java.util.HashSet",),
    "java.util.TreeSet": ("java.util.NavigableSet",),
    "java.util.EnumSet": ("java.util.Set",),
    "java.util.ArrayDeque": ("java.util.Deque",),
    "java.util.PriorityQueue": ("java.util.Queue",),
    "java.util.concurrent.CopyOnWriteArrayList": ("java.util.List",),
    MAP_INTERFACE_NAME: (),
    "java.util.SortedMap": (MAP_INTERFACE_NAME,),
    "java.util.NavigableMap": ("java.util.SortedMap",),
    "java.util.AbstractMap": (MAP_INTERFACE_NAME,),
    "java.util.HashMap": ("java.util.AbstractMap", MAP_INTERFACE_NAME),
    "java.util.LinkedHashMap": ("java.util.HashMap",),
    "java.util.TreeMap": ("java.util.AbstractMap", "java.util.NavigableMap"),
    "java.util.EnumMap": ("java.util.AbstractMap",),
    "java.util.Hashtable": (MAP_INTERFACE_NAME,),
    "java.util.Properties": ("java.util.Hashtable",),
    "java.util.concurrent.ConcurrentMap": (MAP_INTERFACE_NAME,),
    "java.util.concurrent.ConcurrentHashMap": ("java.util.concurrent.ConcurrentMap",),
    ENUM_CLASS_NAME: (),
}
