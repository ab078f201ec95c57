# caesar

A small library of graph algorithms for undirected multigraphs (graphs
without loops that may hold parallel edges), centred on edge colouring of
cubic graphs.

- `caesar.graph.elements` – `Vertex` and `Edge`. An edge keeps its two ends
  and a colour (`-1` while unpainted); `Edge.greedy_paint()` paints it with
  the least colour not used at either end.
- `caesar.graph.graph` – `Graph`: adding and removing vertices and edges
  (by object or by index), lookups by identifier, properties such as
  `is_complete()`, `is_regular(d)`, `is_cubic()`, `is_minimal_cubic()`,
  `Graph.is_strong_isomorphic(g1, g2)`, and an edge colour histogram.
- `caesar.graph.factory` – empty, edgeless, trivial, complete, tetrahedron,
  cyclic, prism and cube graphs.
- `caesar.graph.history` – `ReduceStep` and `ReduceHistory`, a stack of the
  identifiers touched by each reduction step.
- `caesar.graph.reduce` – reduction of a cubic graph by unique and parallel
  edges; `full_reduce(graph, history)` reduces as far as possible and returns
  the number of steps.
- `caesar.graph.restore` – undoing recorded reduction steps.
- `caesar.graph.bicolor_cycle` – `BicolorCycle`, a cycle of edges painted
  alternately in two colours, with colour switching.
- `caesar.graph.coloring` – `edges_coloring_greedy(graph)` and
  `edges_coloring_for_cubic_graph(graph)`, a three-colour (Tait) colouring
  built by reducing the graph and repainting while it is restored.
- `caesar.diag` – `say_warning`, `raise_error`, `check_warning`,
  `check_error`. Errors are printed with the caller's file and line and
  raised as `DiagError` (a `RuntimeError`).

## Installation

```
pip install .
```

## Examples

Edge colouring of a cubic graph:

```python
from caesar.graph.factory import create_cube_graph
from caesar.graph.coloring import edges_coloring_for_cubic_graph, edges_coloring_greedy

g = create_cube_graph()
edges_coloring_for_cubic_graph(g)
assert g.is_edges_coloring_correct()
print(g.edges_colors_histogram())                  # edges of each colour
print(g)

print(edges_coloring_greedy(create_cube_graph()))  # number of colours used
```

Reducing a cubic graph and restoring it:

```python
from caesar.graph.factory import create_prism_graph
from caesar.graph.history import ReduceHistory
from caesar.graph.reduce import full_reduce
from caesar.graph.restore import restore

g = create_prism_graph(3)
history = ReduceHistory()
steps = full_reduce(g, history)
print(steps, g.order(), g.size())

restore(g, history)
print(g.order(), g.size())                         # 6 9
```

Building a graph by hand:

```python
from caesar.graph.graph import Graph

g = Graph()
for _ in range(3):
    g.new_vertex()
g.add_cycle(0, 2)
print(g.is_complete(), g.is_regular(2))            # True True
print(g.add_unique_edge(0, 1))                     # None, the edge exists
```

Errors from checks:

```python
from caesar.diag import DiagError, check_error

try:
    check_error(False, "something went wrong")
except DiagError as err:
    print(err.message, err.file, err.line)
```

## What the package does not do

It has no vector geometry and no mesh handling: the `caesar.geom` and
`caesar.mesh` subpackages hold no modules. There is no command-line program;
everything is used as a library.

## Tests

```
pip install ".[test]"
pytest
```