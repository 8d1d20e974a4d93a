"""
Tests for the data models.

Tests Method rendering, Dependence identity and ScanResult merging.
"""

from pathlib import Path

from engine.models import Dependence, Method, ScanResult


class TestMethod:
    """Tests for the Method record."""

    def test_defaults(self):
        """Test the default flags."""
        method = Method("Calc", "int", "add", ["int", "int"])

        assert method.included_in_test_suite is True
        assert method.input_data_file is None
        assert method.param_types == ("int", "int")

    def test_string_forms(self):
        """Test signature and str rendering."""
        method = Method("Calc", "int", "add", ("int", "int"))

        assert method.signature == "int add(int, int)"
        assert str(method) == "Calc: int add(int, int)"
        assert str(Method("Calc", "void", "reset")) == "Calc: void reset()"

    def test_flags_are_mutable(self):
        """Test that the generator can exclude a method and attach data."""
        method = Method("Calc", "int", "add", ("int", "int"))
        method.included_in_test_suite = False
        method.input_data_file = Path("add.csv")

        assert method.included_in_test_suite is False
        assert method.input_data_file == Path("add.csv")

    def test_field_equality(self):
        """Test that methods compare by their fields."""
        assert Method("A", "int", "f", ("int",)) == Method("A", "int", "f", ["int"])
        assert Method("A", "int", "f", ("int",)) != Method("B", "int", "f", ("int",))


class TestDependence:
    """Tests for the Dependence record."""

    def test_defaults_are_empty(self):
        """Test that missing sets are empty, not {''}."""
        dep = Dependence("Main")

        assert dep.project_dependencies == frozenset()
        assert dep.library_dependencies == frozenset()

    def test_identity_is_class_name(self):
        """Test that equality and hashing ignore dependency contents."""
        first = Dependence("Foo", {"Bar"}, {"vector"})
        second = Dependence("Foo", {"Baz"}, set())

        assert first == second
        assert len({first, second}) == 1
        assert first != Dependence("Bar", {"Bar"}, {"vector"})

    def test_sets_are_frozen(self):
        """Test that dependency sets are stored immutably."""
        dep = Dependence("Foo", {"Bar"}, ["vector"])

        assert isinstance(dep.project_dependencies, frozenset)
        assert isinstance(dep.library_dependencies, frozenset)


class TestScanResult:
    """Tests for the ScanResult aggregate."""

    def test_first_dependence_wins(self):
        """Test that a duplicate class name keeps the first record."""
        result = ScanResult()

        assert result.add_dependence(Dependence("Foo", {"Bar"})) is True
        assert result.add_dependence(Dependence("Foo", {"Baz"})) is False

        assert result.dependency_count == 1
        assert result.dependencies["Foo"].project_dependencies == {"Bar"}

    def test_methods_keep_order(self):
        """Test that methods are appended in order."""
        result = ScanResult()
        result.add_methods([Method("A", "int", "one"), Method("A", "int", "two")])
        result.add_methods([Method("B", "int", "three")])

        assert [m.method_name for m in result.methods] == ["one", "two", "three"]
        assert result.method_count == 3

    def test_dependency_set(self):
        """Test the set handed to the build-file writer."""
        result = ScanResult()
        result.add_dependence(Dependence("Foo"))
        result.add_dependence(Dependence("Bar"))

        assert result.dependency_set() == {Dependence("Foo"), Dependence("Bar")}
