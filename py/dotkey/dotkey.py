# Copyright (c) 2025 Voxgig Ltd. MIT LICENSE.
#
# Dotkey
# ======
#
# Utility functions to edit in-memory JSON-like documents by key path.
# Paths are dot-separated strings ("address.city") or lists of segments.
# Documents are mutated in place; sibling key order is always preserved.
#
# Main utilities
# - getpath: get the value at a key path deep inside a document.
# - setpath: set an escaped string value at a key path, creating parents.
# - delpath: delete the key at a key path, if present.
# - renamekey: rename a key, keeping its position among its siblings.
# - updateval: replace the value of an existing key.
# - addkey: add a new key to an existing map.
# - delkey: delete an existing key.
#
# Minor utilities
# - isnode, islist, ismap, iskey: identify value kinds.
# - strkey: string form of a key.
# - splitpath: list of path segments.
# - keysof: list of map keys, in insertion order.
# - haskey: true if key value is defined.
# - clone: create a copy of a JSON-like data structure.
# - items: list entries of a map as [key, value] pairs.
# - getprop: safely get a property value by key.
# - setprop: safely set a property value by key.
# - delprop: safely delete a property by key.
# - stringify: human-friendly string version of a value.
# - pathify: printable version of a path.
# - escquote: escape double quotes.


from typing import *
import logging
import json


log = logging.getLogger(__name__)


# Collision policies for renamekey.
S_overwrite = 'overwrite'
S_reject = 'reject'

# General strings.
S_MT = ''
S_DT = '.'
S_CN = ':'
S_QT = '"'
S_BQT = '\\"'


# The standard undefined value for this language.
UNDEF = None


def isnode(val: Any = UNDEF) -> bool:
    "Value is a node - defined, and a map (hash) or list (array)."
    return isinstance(val, (dict, list))


def ismap(val: Any = UNDEF) -> bool:
    "Value is a defined map (hash) with string keys."
    return isinstance(val, dict)


def islist(val: Any = UNDEF) -> bool:
    "Value is a defined list (array)."
    return isinstance(val, list)


def iskey(key: Any = UNDEF) -> bool:
    "Value is a defined string key. The empty string is a valid (if odd) key."
    return isinstance(key, str)


def strkey(key: Any = UNDEF) -> str:
    if UNDEF == key:
        return S_MT

    if isinstance(key, str):
        return key

    if isinstance(key, bool):
        return S_MT

    if isinstance(key, int):
        return str(key)

    if isinstance(key, float):
        return str(int(key))

    return S_MT


def escquote(s: Any = UNDEF) -> str:
    "Escape double quotes with a backslash, in the string form of a value."
    return stringify(s).replace(S_QT, S_BQT)


def splitpath(path: Any = UNDEF) -> Optional[List[str]]:
    """
    Split a path into its segments. A string splits on dots, so the empty
    string is a single empty segment. A list is copied. Anything else is
    not a path.
    """
    if isinstance(path, str):
        return path.split(S_DT)
    elif islist(path):
        return [strkey(p) for p in path]
    return UNDEF


def getprop(val: Any = UNDEF, key: Any = UNDEF, alt: Any = UNDEF) -> Any:
    """
    Safely get a property of a map. Undefined arguments return undefined.
    If the key is not found, return the alternative value.
    """
    if UNDEF == val or UNDEF == key:
        return alt

    out = alt

    if ismap(val):
        out = val.get(strkey(key), alt)

    if UNDEF == out:
        return alt

    return out


def setprop(parent: Any, key: Any, val: Any):
    """
    Safely set a property on a map.
    If `val` is UNDEF, delete the key from parent.
    """
    if not iskey(key):
        return parent

    if ismap(parent):
        if UNDEF == val:
            parent.pop(key, UNDEF)
        else:
            parent[key] = val

    return parent


def delprop(parent: Any, key: Any):
    "Delete a property from a map, if the map owns it."
    if not iskey(key):
        return parent

    if ismap(parent) and key in parent:
        del parent[key]

    return parent


def keysof(val: Any = UNDEF) -> list[str]:
    "Keys of a map, in insertion order."
    if not ismap(val):
        return []
    return list(val.keys())


def haskey(val: Any = UNDEF, key: Any = UNDEF) -> bool:
    "Value of property with name key in map val is defined."
    return UNDEF != getprop(val, key)


def items(val: Any = UNDEF):
    "List the entries of a map as an array of (key, value) tuples, in order."
    if ismap(val):
        return [(k, val[k]) for k in keysof(val)]
    return []


def stringify(val: Any, maxlen: int = UNDEF):
    "Safely stringify a value for printing (NOT JSON!)."

    valstr = S_MT

    if UNDEF == val:
        return valstr

    if isinstance(val, str):
        valstr = val
    else:
        try:
            valstr = json.dumps(val, separators=(',', ':'))
            valstr = valstr.replace(S_QT, S_MT)
        except Exception:
            valstr = str(val)

    if maxlen is not UNDEF:
        json_len = len(valstr)
        valstr = valstr[:maxlen]

        if 3 < maxlen < json_len:
            valstr = valstr[:maxlen - 3] + '...'

    return valstr


def pathify(val: Any = UNDEF) -> str:
    "Printable form of a path, for messages."
    parts = splitpath(val)

    if UNDEF == parts:
        return f"<unknown-path{S_MT if UNDEF == val else S_CN+stringify(val, 47)}>"

    if [S_MT] == parts or 0 == len(parts):
        return "<root>"

    return S_DT.join(parts)


def clone(val: Any = UNDEF):
    """
    Clone a JSON-like data structure. Map key order is kept.
    """
    if UNDEF == val:
        return UNDEF
    return json.loads(json.dumps(val))


def _walkparent(doc: Any, parts: List[str]) -> Any:
    # Resolve the chain of parent maps without creating anything.
    val = doc
    for part in parts:
        if not ismap(val):
            return UNDEF
        val = getprop(val, part)
    return val


def _haspath(doc: Any, path: Any) -> bool:
    # The last segment is owned by its parent map, whatever its value.
    parts = splitpath(path)
    if not parts:
        return False

    last = parts.pop()
    parent = _walkparent(doc, parts)
    return ismap(parent) and last in parent


def getpath(doc, path):
    """
    Get a value from the document using a key path.
    Any missing or non-map step along the way gives UNDEF.
    """
    parts = splitpath(path)
    if UNDEF == parts:
        return UNDEF

    return _walkparent(doc, parts)


def setpath(doc, path, val, vivify=True):
    """
    Set an escaped string value in the document at a key path.

    Missing parents are created as empty maps. Parents that exist but are
    not maps are silently replaced. With `vivify` False, nothing is
    created or replaced: a missing or non-map parent means no write, and
    False is returned.
    """
    parts = splitpath(path)
    if not parts or not ismap(doc):
        return False

    last = parts.pop()

    if not vivify and not ismap(_walkparent(doc, parts)):
        return False

    parent = doc
    for part in parts:
        child = getprop(parent, part)
        if not ismap(child):
            child = {}
            setprop(parent, part, child)
        parent = child

    setprop(parent, last, escquote(val))
    return True


def delpath(doc, path):
    "Delete the key at a key path. A missing parent or key is a no-op."
    parts = splitpath(path)
    if not parts:
        return

    last = parts.pop()
    delprop(_walkparent(doc, parts), last)


def renamekey(doc, path, newkey, collide=S_overwrite):
    """
    Rename the key at a key path, keeping its position among its siblings.
    Values are carried over unchanged (no escaping).

    The parent map is rebuilt in place, so references to it, and to the
    root document, remain valid.

    If `newkey` already names a sibling, the `collide` policy applies:
    - `overwrite`: entries are re-inserted in order and the last write
      wins. The surviving key keeps the position of its first occurrence.
    - `reject`: nothing changes and False is returned.
    """
    parts = splitpath(path)
    if not parts or not iskey(newkey):
        return False

    oldkey = parts.pop()
    parent = _walkparent(doc, parts)

    if not ismap(parent) or oldkey not in parent:
        return False

    if oldkey == newkey:
        return True

    if S_reject == collide and newkey in parent:
        return False

    entries = [(newkey if k == oldkey else k, v) for k, v in items(parent)]

    parent.clear()
    for k, v in entries:
        parent[k] = v

    return True


def updateval(doc, path, newval):
    "Update the value of an existing key. A missing key gives False."
    if _haspath(doc, path):
        return setpath(doc, path, newval)
    return False


def addkey(doc, path, key, newval):
    """
    Add a new key to the map at a key path (the document itself for an
    empty path). The key must not already exist.
    """
    target = getpath(doc, path) if path else doc

    if not iskey(key):
        log.error('Key "%s" is not a string.', stringify(key))
        return False

    if ismap(target):
        if key not in target:
            setprop(target, key, escquote(newval))
            return True

        log.error('Key "%s" already exists at path "%s".', key, stringify(path))
        return False

    log.error('Path "%s" is not an object.', stringify(path))
    return False


def delkey(doc, path):
    "Delete an existing key. A missing key gives False."
    if _haspath(doc, path):
        delpath(doc, path)
        return True

    log.error('Path "%s" does not exist.', stringify(path))
    return False


# Create a KeyUtility class with all utility functions as attributes
class KeyUtility:
    def __init__(self):
        self.addkey = addkey
        self.clone = clone
        self.delkey = delkey
        self.delpath = delpath
        self.delprop = delprop
        self.escquote = escquote
        self.getpath = getpath
        self.getprop = getprop
        self.haskey = haskey
        self.iskey = iskey
        self.islist = islist
        self.ismap = ismap
        self.isnode = isnode
        self.items = items
        self.keysof = keysof
        self.pathify = pathify
        self.renamekey = renamekey
        self.setpath = setpath
        self.setprop = setprop
        self.splitpath = splitpath
        self.stringify = stringify
        self.strkey = strkey
        self.updateval = updateval


__all__ = [
    'KeyUtility',
    'S_overwrite',
    'S_reject',
    'UNDEF',
    'addkey',
    'clone',
    'delkey',
    'delpath',
    'delprop',
    'escquote',
    'getpath',
    'getprop',
    'haskey',
    'iskey',
    'islist',
    'ismap',
    'isnode',
    'items',
    'keysof',
    'pathify',
    'renamekey',
    'setpath',
    'setprop',
    'splitpath',
    'stringify',
    'strkey',
    'updateval',
]
