"""
Cache key builders.
"""


def _render(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def build_list_cache_key(prefix: str, **params) -> str:
    """
    Build a deterministic key for a list query.

    Parameters keep their call order; None and empty-string values are left
    out so an omitted optional filter never changes the key.

    >>> build_list_cache_key('brand:list', page=1, limit=50, active=True, search=None)
    'brand:list:page:1:limit:50:active:true'
    """
    parts = [prefix]
    for name, value in params.items():
        if value is None or value == '':
            continue
        parts.append(f"{name}:{_render(value)}")
    return ':'.join(parts)
