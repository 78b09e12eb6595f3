from aptree.modules.graph import NOT_FOUND, DependencyGraph, DependencyGraphBuilder, build_graph


class TestDependencyGraphBuilder:
    def test_diamond_expanded_once(self, make_repo):
        repo = make_repo({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []})
        graph = build_graph("A", repo)
        assert graph.to_dict() == {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}
        assert list(graph) == ["A", "B", "C", "D"]

    def test_breadth_first_order(self, make_repo):
        repo = make_repo({"A": ["B", "C"], "B": ["E"], "C": ["D"], "D": [], "E": []})
        assert list(build_graph("A", repo)) == ["A", "B", "C", "E", "D"]

    def test_cycle_terminates(self, make_repo):
        repo = make_repo({"A": ["B"], "B": ["A"]})
        assert build_graph("A", repo).to_dict() == {"A": ["B"], "B": ["A"]}

    def test_missing_dependency_gets_sentinel(self, make_repo):
        graph = build_graph("A", make_repo({"A": ["Z"]}))
        assert graph.get("Z") == [NOT_FOUND]

    def test_missing_root(self, make_repo):
        graph = build_graph("ghost", make_repo({"A": []}))
        assert graph.to_dict() == {"ghost": [NOT_FOUND]}

    def test_unreachable_packages_not_visited(self, make_repo):
        graph = build_graph("A", make_repo({"A": [], "island": ["A"]}))
        assert "island" not in graph

    def test_filter_stops_expansion_but_keeps_edge(self, make_repo):
        repo = make_repo({"A": ["B", "C"], "B": ["X"], "C": []})
        graph = build_graph("A", repo, "B")
        assert graph.get("A") == ["B", "C"]
        assert "B" not in graph
        assert "X" not in graph
        assert "C" in graph

    def test_filter_matching_root(self, make_repo):
        graph = build_graph("A", make_repo({"A": ["B"], "B": []}), "A")
        assert len(graph) == 0

    def test_empty_filter_means_no_filtering(self, make_repo):
        repo = make_repo({"A": ["B"], "B": []})
        assert build_graph("A", repo, "") == build_graph("A", repo)

    def test_build_is_idempotent(self, make_repo):
        repo = make_repo({"A": ["B", "C"], "B": ["C", "Z"], "C": ["A"]})
        builder = DependencyGraphBuilder()
        first = builder.build("A", repo, "Q")
        second = builder.build("A", repo, "Q")
        assert first == second
        assert first.to_dict() == second.to_dict()


class TestDependencyGraph:
    def test_add_and_get(self):
        graph = DependencyGraph()
        graph.add_package("a", ("b", "c"))
        assert graph.get("a") == ["b", "c"]
        assert graph.get("b") is None
        assert graph.get("b", []) == []
        assert list(graph.items()) == [("a", ["b", "c"])]

    def test_to_dict_is_a_copy(self):
        graph = DependencyGraph()
        graph.add_package("a", ["b"])
        graph.to_dict()["a"].append("x")
        assert graph.get("a") == ["b"]
