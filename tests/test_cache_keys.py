"""
List cache key construction.
"""
from shared.application.cache_keys import build_list_cache_key


def test_brand_key_is_deterministic():
    first = build_list_cache_key(
        'brand:list', page=1, limit=50, active=True, sort_by='name', sort_order='asc', search=None,
    )
    second = build_list_cache_key(
        'brand:list', page=1, limit=50, active=True, sort_by='name', sort_order='asc', search=None,
    )
    assert first == second == 'brand:list:page:1:limit:50:active:true:sort_by:name:sort_order:asc'


def test_omitted_filters_do_not_change_key():
    with_blank = build_list_cache_key('product:list', page=2, limit=10, status=None, search='')
    without = build_list_cache_key('product:list', page=2, limit=10)
    assert with_blank == without == 'product:list:page:2:limit:10'


def test_false_is_kept():
    assert build_list_cache_key('category:list', active=False) == 'category:list:active:false'
