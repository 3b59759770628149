from enginecore.debug_draw import DebugDrawManager, LineVertex

RED = (1.0, 0.0, 0.0, 1.0)


def test_draw_line_adds_two_vertices_and_indices():
    manager = DebugDrawManager()
    manager.draw_line((0.0, 0.0, 0.0), (1.0, 2.0, 3.0), RED)
    assert manager.vertices == [
        LineVertex((0.0, 0.0, 0.0), RED),
        LineVertex((1.0, 2.0, 3.0), RED),
    ]
    assert manager.indices == [0, 1]


def test_second_line_continues_indices():
    manager = DebugDrawManager()
    manager.draw_line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), RED)
    manager.draw_line((5.0, 5.0, 5.0), (6.0, 6.0, 6.0), RED, 3.0)
    assert manager.indices == [0, 1, 2, 3]
    assert manager.vertices[2].position == (5.0, 5.0, 5.0)


def test_aabb_box_draws_twelve_edges():
    manager = DebugDrawManager()
    box_min, box_max = (-1.0, -2.0, -3.0), (1.0, 2.0, 3.0)
    manager.draw_aabb_box(box_min, box_max, RED)
    assert len(manager.vertices) == 24
    assert manager.indices == list(range(24))
    assert all(v.color == RED for v in manager.vertices)


def test_aabb_box_corners_and_edges():
    manager = DebugDrawManager()
    box_min, box_max = (-1.0, -2.0, -3.0), (1.0, 2.0, 3.0)
    manager.draw_aabb_box(box_min, box_max, RED)
    positions = [v.position for v in manager.vertices]
    for pos in positions:
        for axis in range(3):
            assert pos[axis] in (box_min[axis], box_max[axis])
    assert len(set(positions)) == 8
    for start, end in zip(positions[0::2], positions[1::2]):
        differing = sum(1 for a, b in zip(start, end) if a != b)
        assert differing == 1
    assert positions[0] == box_min
    assert positions[1] == (box_max[0], box_min[1], box_min[2])


def test_clear_empties_buffers():
    manager = DebugDrawManager()
    manager.draw_aabb_box((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), RED)
    manager.clear()
    assert manager.vertices == []
    assert manager.indices == []
    manager.draw_line((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), RED)
    assert manager.indices == [0, 1]


def test_singleton_instance_is_shared():
    DebugDrawManager.destroy()
    first = DebugDrawManager.get()
    first.draw_line((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), RED)
    assert DebugDrawManager.get() is first
    assert len(DebugDrawManager.get().vertices) == 2
    DebugDrawManager.destroy()
    assert DebugDrawManager.get().vertices == []
    DebugDrawManager.destroy()