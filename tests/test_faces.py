from ndhull import ConvexFace, DefaultConvexFace, Outcome, create_hull


class LabeledFace(ConvexFace):
    def __init__(self):
        super().__init__()
        self.label = "unlabeled"


class TestConvexFace:
    """Tests for facet types."""

    def test_empty_face(self):
        face = DefaultConvexFace()
        assert face.vertices == ()
        assert face.adjacency == ()
        assert face.dimension == 0

    def test_signed_distance(self):
        face = DefaultConvexFace()
        face.normal = (0.0, 0.0, 1.0)
        face.offset = -1.0
        assert face.signed_distance((3.0, 4.0, 3.0)) == 2.0
        assert face.signed_distance((0.0, 0.0, 0.0)) == -1.0

    def test_custom_face_type(self, tetrahedron):
        """Caller face types are instantiated and populated by the engine."""
        result = create_hull(tetrahedron, LabeledFace)
        assert result.outcome is Outcome.SUCCESS
        assert len(result.hull.faces) == 4
        for face in result.hull.faces:
            assert isinstance(face, LabeledFace)
            assert face.label == "unlabeled"
            assert all(isinstance(nb, LabeledFace) for nb in face.adjacency)

    def test_adjacency_is_opposite_vertex(self, tetrahedron):
        """adjacency[i] shares every vertex of the face except vertices[i]."""
        hull = create_hull(tetrahedron, LabeledFace).hull
        for face in hull.faces:
            for i, nb in enumerate(face.adjacency):
                ridge = [v for j, v in enumerate(face.vertices) if j != i]
                assert all(any(v is w for w in nb.vertices) for v in ridge)
                assert not any(face.vertices[i] is w for w in nb.vertices)

    def test_repr(self):
        assert repr(DefaultConvexFace()).startswith("DefaultConvexFace(")
