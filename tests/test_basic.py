from unittest.mock import Mock, call

from sineengine.basic import Basic, Group


def _member(active=True, visible=True):
    return Mock(active=active, visible=visible)


def test_destroy_deactivates():
    b = Basic()
    b.destroy()
    assert b.active is False


def test_new_basic_is_active_and_visible():
    b = Basic()
    assert (b.active, b.visible) == (True, True)


def test_group_updates_only_active_in_order():
    g = Group()
    order = Mock()
    a, b, c = _member(), _member(active=False), _member()
    order.attach_mock(a, "a")
    order.attach_mock(b, "b")
    order.attach_mock(c, "c")
    for m in (a, b, c):
        g.add(m)
    g.update(0.5)
    assert g.members == [a, b, c]
    assert order.mock_calls == [call.a.update(0.5), call.c.update(0.5)]
    assert b.update.call_count == 0


def test_group_draws_only_visible():
    g = Group()
    a, b = _member(visible=False), _member()
    c = _member(active=False)
    for m in (a, b, c):
        g.add(m)
    surface = object()
    g.draw(surface)
    assert a.draw.call_count == 0
    assert b.draw.call_args_list == [call(surface)]
    assert c.draw.call_count == 0


def test_nested_group_passes_update_through():
    outer = Group()
    inner = Group()
    leaf = _member()
    inner.add(leaf)
    outer.add(inner)
    outer.update(0.25)
    assert leaf.update.call_args_list == [call(0.25)]
    inner.destroy()
    outer.update(0.25)
    assert leaf.update.call_count == 1


def test_remove_and_remove_missing():
    g = Group()
    a, b = Basic(), Basic()
    g.add(a)
    g.remove(b)
    assert g.members == [a]
    g.remove(a)
    assert g.members == []