"""Property-based tests for omit_deep."""

from hypothesis import given
from hypothesis import strategies as st
from structstest import key_reachable

from deepomit import BREAK, omit_deep

KEYS = st.sampled_from(["omit", "keep", "other", "name", "id"])

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4)
    | st.lists(children, max_size=3).map(tuple)
    | st.dictionaries(KEYS, children, max_size=4),
    max_leaves=30,
)


@st.composite
def linked_graphs(draw):
    """Generate dict nodes linked to each other through bare, list or tuple edges."""
    size = draw(st.integers(min_value=1, max_value=5))
    nodes = [
        {"omit": i} if draw(st.booleans()) else {"id": i} for i in range(size)
    ]

    for node in nodes:
        edges = draw(st.lists(st.sampled_from(["a", "b", "c"]), max_size=3, unique=True))
        for edge in edges:
            target = nodes[draw(st.integers(min_value=0, max_value=size - 1))]
            wrap = draw(st.sampled_from(["bare", "list", "tuple"]))
            if wrap == "bare":
                node[edge] = target
            elif wrap == "list":
                node[edge] = [target, edge]
            else:
                node[edge] = (target, edge)

    root = draw(st.sampled_from(["dict", "list", "tuple"]))
    if root == "list":
        return list(nodes)
    if root == "tuple":
        return tuple(nodes)
    return nodes[0]


def without_key(value, key):
    """Reference implementation that always copies."""
    if isinstance(value, dict):
        return {k: without_key(v, key) for k, v in value.items() if k != key}
    if isinstance(value, list):
        return [without_key(v, key) for v in value]
    if isinstance(value, tuple):
        return tuple(without_key(v, key) for v in value)
    return value


class TestPropertyBasedOmit:
    """Property-based tests for the omit transform."""

    @given(json_values)
    def test_key_never_survives(self, value):
        """Test no occurrence of the key is reachable from the result."""
        assert not key_reachable(omit_deep(value, "omit"), "omit")

    @given(json_values)
    def test_matches_copying_implementation(self, value):
        """Test the result equals a naive full copy without the key."""
        assert omit_deep(value, "omit") == without_key(value, "omit")

    @given(json_values)
    def test_idempotent(self, value):
        """Test applying twice changes nothing more."""
        once = omit_deep(value, "omit")
        assert omit_deep(once, "omit") is once

    @given(json_values)
    def test_shared_when_key_absent(self, value):
        """Test the input is returned by reference when it has no key."""
        if not key_reachable(value, "omit"):
            assert omit_deep(value, "omit") is value

    @given(json_values)
    def test_break_at_root_children(self, value):
        """Test BREAK on every top-level entry leaves them untouched."""
        result = omit_deep(value, "omit", keep=lambda path: BREAK if len(path) == 1 else None)

        if isinstance(value, dict):
            assert all(result[k] is v for k, v in value.items())
        elif isinstance(value, (list, tuple)):
            assert result is value


class TestPropertyBasedGraphs:
    """Property-based tests for aliased and cyclic inputs."""

    @given(linked_graphs())
    def test_key_never_reachable(self, graph):
        """Test the key is gone from every node reachable from the result."""
        assert not key_reachable(omit_deep(graph, "omit"), "omit")

    @given(linked_graphs())
    def test_input_untouched(self, graph):
        """Test the input graph still holds its keys after the call."""
        had_key = key_reachable(graph, "omit")

        omit_deep(graph, "omit")

        assert key_reachable(graph, "omit") == had_key

    @given(linked_graphs())
    def test_aliases_share_one_output(self, graph):
        """Test every edge to the same node lands on the same output object."""
        result = omit_deep(graph, "omit")

        outputs = {}
        stack = [(graph, result)]
        while stack:
            before, after = stack.pop()
            if type(before) not in (dict, list, tuple):
                continue
            if id(before) in outputs:
                assert outputs[id(before)] is after
                continue
            outputs[id(before)] = after
            if type(before) is dict:
                stack.extend((v, after[k]) for k, v in before.items() if k != "omit")
            else:
                stack.extend(zip(before, after))
