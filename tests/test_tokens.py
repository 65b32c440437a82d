"""
Tests for deferred references and unit value types.
"""

import pytest

from stratus import CfnResource, Duration, Literal, Size, Stack, Sub
from stratus.core.tokens import resolve


class TestReferences:
    """Tests for Literal, GetAtt and Sub."""

    def test_literal_is_not_deferred(self):
        ref = Literal("value")

        assert ref.render() == "value"
        assert ref.is_deferred() is False

    def test_sub_renders_intrinsic(self):
        ref = Sub("arn:${AWS::Partition}:s3:::bucket")

        assert ref.render() == {"Fn::Sub": "arn:${AWS::Partition}:s3:::bucket"}
        assert ref.is_deferred() is True

    def test_get_att_uses_logical_id(self):
        stack = Stack("tokens")
        resource = CfnResource(stack, "Queue", type="AWS::SQS::Queue")

        assert resource.get_att("Arn").render() == {"Fn::GetAtt": ["Queue", "Arn"]}

    def test_get_att_equality(self):
        """Two references to the same attribute of the same resource are equal."""
        stack = Stack("tokens")
        a = CfnResource(stack, "A", type="AWS::SQS::Queue")
        b = CfnResource(stack, "B", type="AWS::SQS::Queue")

        assert a.get_att("Arn") == a.get_att("Arn")
        assert a.get_att("Arn") != a.get_att("QueueName")
        assert a.get_att("Arn") != b.get_att("Arn")
        assert len({a.get_att("Arn"), a.get_att("Arn")}) == 1


class TestResolve:
    """Tests for resolving property trees."""

    def test_keeps_none_values(self):
        """None is a value like any other; omitting properties is the resource's job."""
        assert resolve({"A": 1, "B": None, "C": {"D": None}}) == {"A": 1, "B": None, "C": {"D": None}}

    def test_renders_nested_references(self):
        value = {
            "List": [Literal("x"), Sub("${AWS::Region}")],
            "Nested": {"Ref": Literal(3)},
        }

        assert resolve(value) == {
            "List": ["x", {"Fn::Sub": "${AWS::Region}"}],
            "Nested": {"Ref": 3},
        }

    def test_keeps_key_order(self):
        resolved = resolve({"B": "2", "A": "1"})

        assert list(resolved) == ["B", "A"]


class TestDuration:
    """Tests for Duration."""

    def test_conversions(self):
        assert Duration.minutes(15).to_seconds() == 900
        assert Duration.hours(1).to_seconds() == 3600
        assert Duration.seconds(42).to_seconds() == 42

    def test_fractional_seconds_rejected(self):
        with pytest.raises(ValueError, match="whole number of seconds"):
            Duration.seconds(1.5).to_seconds()


class TestSize:
    """Tests for Size."""

    def test_conversions(self):
        assert Size.mebibytes(128).to_mebibytes() == 128
        assert Size.gibibytes(2).to_mebibytes() == 2048
        assert Size.kibibytes(2048).to_mebibytes() == 2

    def test_fractional_mebibytes_rejected(self):
        with pytest.raises(ValueError, match="whole number of mebibytes"):
            Size.kibibytes(100).to_mebibytes()
