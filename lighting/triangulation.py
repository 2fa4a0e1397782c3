def fan_indices(vertex_count):
    """Index triples of a closed triangle fan around vertex 0.

    For n vertices there are n - 1 triangles; the last one wraps back to
    vertex 1. Fewer than two vertices give no triangles.
    """
    triangle_count = vertex_count - 1
    if triangle_count < 1:
        return []
    return [
        (0, i + 1, (i + 1) % triangle_count + 1)
        for i in range(triangle_count)
    ]


def fan_triangles(vertices):
    """The fan triangles of a vertex list as ((x, y), (x, y), (x, y)) triples."""
    points = [(v.pos.x, v.pos.y) for v in vertices]
    return [
        (points[a], points[b], points[c])
        for a, b, c in fan_indices(len(points))
    ]
