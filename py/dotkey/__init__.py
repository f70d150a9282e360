# dotkey init

from .dotkey import (
    KeyUtility,
    UNDEF,
    S_overwrite,
    S_reject,
    addkey,
    clone,
    delkey,
    delpath,
    delprop,
    escquote,
    getpath,
    getprop,
    haskey,
    iskey,
    islist,
    ismap,
    isnode,
    items,
    keysof,
    pathify,
    renamekey,
    setpath,
    setprop,
    splitpath,
    stringify,
    strkey,
    updateval,
)


__all__ = [
    'KeyUtility',
    'UNDEF',
    'S_overwrite',
    'S_reject',
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
