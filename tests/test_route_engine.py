from trains.domain.models import NO_SUCH_ROUTE, UNREACHABLE, BoundType
from trains.graph import GraphStore, RouteEngine, next_metric


def engine_for(*edges):
    return RouteEngine(GraphStore.build(edges))


# route_distance


def test_route_distance_existing_routes(engine):
    assert engine.route_distance("ABC") == 9
    assert engine.route_distance("AD") == 5
    assert engine.route_distance("ADC") == 13
    assert engine.route_distance("AEBCD") == 22


def test_route_distance_no_such_route(engine):
    assert engine.route_distance("AED") is NO_SUCH_ROUTE


def test_route_distance_accepts_lists(engine):
    assert engine.route_distance(["A", "B", "C"]) == 9
    assert engine.route_distance(("A", "E", "D")) is NO_SUCH_ROUTE


def test_route_distance_missing_hop_in_the_middle(engine):
    # E -> D does not exist even though D -> C does
    assert engine.route_distance("AEDC") is NO_SUCH_ROUTE


def test_route_distance_from_dead_end():
    engine = engine_for(("A", "B", 3))

    assert engine.route_distance("BA") is NO_SUCH_ROUTE
    assert engine.route_distance("ZA") is NO_SUCH_ROUTE


def test_route_distance_single_town_is_no_such_route(engine):
    assert engine.route_distance("A") is NO_SUCH_ROUTE
    assert engine.route_distance("") is NO_SUCH_ROUTE


def test_route_distance_zero_total_is_no_such_route():
    engine = engine_for(("A", "B", 0))

    assert engine.route_distance("AB") is NO_SUCH_ROUTE


def test_route_distance_adds_parallel_tracks():
    engine = engine_for(("A", "B", 3), ("A", "B", 1))

    assert engine.route_distance("AB") == 4


# count_routes


def test_next_metric():
    assert next_metric(1, BoundType.STOPS, 10) == 2
    assert next_metric(1, BoundType.DISTANCE, 10) == 11


def test_count_routes_at_most_stops(engine):
    assert engine.count_routes("C", "C", 3, BoundType.STOPS) == 2


def test_count_routes_exact_stops(engine):
    assert engine.count_routes("A", "C", 4, BoundType.STOPS, exact=True) == 3


def test_count_routes_exact_stops_passes_through_end(engine):
    # A-B-C-D-C reaches C after two stops and still counts at four
    assert engine.count_routes("A", "C", 4, BoundType.STOPS, exact=True) > (
        engine.count_routes("A", "C", 2, BoundType.STOPS, exact=True)
    )
    assert engine.count_routes("A", "C", 2, BoundType.STOPS, exact=True) == 2


def test_count_routes_distance_less_than(engine):
    assert engine.count_routes("C", "C", 30, BoundType.DISTANCE) == 7


def test_count_routes_distance_bound_is_exclusive(engine):
    # C-E-B-C is exactly 9 long
    assert engine.count_routes("C", "C", 9, BoundType.DISTANCE) == 0
    assert engine.count_routes("C", "C", 10, BoundType.DISTANCE) == 1


def test_count_routes_bound_below_any_route(engine):
    assert engine.count_routes("C", "C", 1, BoundType.STOPS) == 0
    assert engine.count_routes("A", "B", 0, BoundType.STOPS) == 0
    assert engine.count_routes("A", "B", 5, BoundType.DISTANCE) == 0


def test_count_routes_start_is_not_a_route_by_itself(engine):
    assert engine.count_routes("A", "A", 10, BoundType.STOPS) == 0


def test_count_routes_stops_at_dead_ends():
    engine = engine_for(("A", "B", 1), ("A", "C", 1))

    assert engine.count_routes("A", "B", 3, BoundType.STOPS) == 1
    assert engine.count_routes("A", "Z", 3, BoundType.STOPS) == 0


def test_count_routes_handles_deep_bounds():
    engine = engine_for(("A", "A", 1))

    assert engine.count_routes("A", "A", 5000, BoundType.STOPS) == 5000
    assert engine.count_routes("A", "A", 5000, BoundType.STOPS, exact=True) == 1
    assert engine.count_routes("A", "A", 5001, BoundType.DISTANCE) == 5000


# shortest_path_length


def test_shortest_path_length(engine):
    assert engine.shortest_path_length("A", "C") == 9
    assert engine.shortest_path_length("A", "E") == 7
    assert engine.shortest_path_length("A", "B") == 5


def test_shortest_cycle_length(engine):
    assert engine.shortest_path_length("B", "B") == 9
    assert engine.shortest_path_length("C", "C") == 9


def test_shortest_path_unreachable():
    engine = engine_for(("A", "B", 3), ("C", "D", 2))

    assert engine.shortest_path_length("B", "A") is UNREACHABLE
    assert engine.shortest_path_length("A", "D") is UNREACHABLE
    assert engine.shortest_path_length("A", "A") is UNREACHABLE


def test_shortest_path_unknown_towns(engine):
    assert engine.shortest_path_length("Z", "A") is UNREACHABLE
    assert engine.shortest_path_length("A", "Z") is UNREACHABLE
    assert engine.shortest_path_length("Z", "Z") is UNREACHABLE


def test_shortest_cycle_ignores_self_loop_on_start():
    engine = engine_for(("A", "A", 1), ("A", "B", 2), ("B", "A", 2))

    assert engine.shortest_path_length("A", "A") == 4


def test_shortest_path_prefers_cheaper_indirect_route():
    engine = engine_for(("A", "C", 10), ("A", "B", 3), ("B", "C", 4))

    assert engine.shortest_path_length("A", "C") == 7


def test_empty_graph_queries():
    engine = engine_for()

    assert engine.route_distance("AB") is NO_SUCH_ROUTE
    assert engine.count_routes("A", "B", 10, BoundType.STOPS) == 0
    assert engine.shortest_path_length("A", "B") is UNREACHABLE


def test_queries_are_idempotent(engine):
    first = (
        engine.route_distance("AEBCD"),
        engine.count_routes("C", "C", 30, BoundType.DISTANCE),
        engine.shortest_path_length("B", "B"),
    )
    second = (
        engine.route_distance("AEBCD"),
        engine.count_routes("C", "C", 30, BoundType.DISTANCE),
        engine.shortest_path_length("B", "B"),
    )

    assert first == second == (22, 7, 9)


def test_count_routes_exact_distance(engine):
    # a bound of 10 means less than 10; C-E-B-C is exactly 9
    assert engine.count_routes("C", "C", 10, BoundType.DISTANCE, exact=True) == 1
    assert engine.count_routes("C", "C", 9, BoundType.DISTANCE, exact=True) == 0
