"""Tests for aws_password_extractor.core.processors.instance_enumerator."""

from __future__ import annotations

import itertools

import pytest

from aws_password_extractor.core.processors.instance_enumerator import InstanceEnumerator
from aws_password_extractor.utils.exceptions import EnumerationLimitError
from conftest import make_instance, make_page


class TestPagination:
    """Pages are followed until NextToken runs out."""

    def test_single_page(self, mock_ec2_manager):
        mock_ec2_manager.describe_instances_page.return_value = make_page(
            [[make_instance("i-1", "a")]]
        )

        instances = InstanceEnumerator().enumerate(mock_ec2_manager)

        assert [i["InstanceId"] for i in instances] == ["i-1"]
        mock_ec2_manager.describe_instances_page.assert_called_once_with(10, None)

    def test_concatenates_pages_in_order(self, mock_ec2_manager):
        mock_ec2_manager.describe_instances_page.side_effect = [
            make_page([[make_instance("i-1", "a"), make_instance("i-2", "b")],
                       [make_instance("i-3", "c")]], next_token="t1"),
            make_page([[make_instance("i-4", "d")]], next_token="t2"),
            make_page([[make_instance("i-5", "e")], [make_instance("i-6", "f")]]),
        ]

        instances = InstanceEnumerator().enumerate(mock_ec2_manager)

        assert [i["InstanceId"] for i in instances] == ["i-1", "i-2", "i-3", "i-4", "i-5", "i-6"]
        assert mock_ec2_manager.describe_instances_page.call_count == 3
        calls = mock_ec2_manager.describe_instances_page.call_args_list
        assert [c.args for c in calls] == [(10, None), (10, "t1"), (10, "t2")]

    def test_empty_token_ends_the_loop(self, mock_ec2_manager):
        mock_ec2_manager.describe_instances_page.side_effect = [
            make_page([[make_instance("i-1", "a")]], next_token="t1"),
            make_page([], next_token=""),
        ]

        instances = InstanceEnumerator().enumerate(mock_ec2_manager)

        assert len(instances) == 1
        assert mock_ec2_manager.describe_instances_page.call_count == 2

    def test_empty_region(self, mock_ec2_manager):
        assert InstanceEnumerator().enumerate(mock_ec2_manager) == []

    def test_custom_page_size(self, mock_ec2_manager):
        InstanceEnumerator(page_size=25).enumerate(mock_ec2_manager)

        mock_ec2_manager.describe_instances_page.assert_called_once_with(25, None)


class TestBounds:
    """A misbehaving API cannot keep the loop running forever."""

    def test_page_cap(self, mock_ec2_manager):
        mock_ec2_manager.describe_instances_page.return_value = make_page([], next_token="again")

        with pytest.raises(EnumerationLimitError, match="limit of 3"):
            InstanceEnumerator(max_pages=3).enumerate(mock_ec2_manager)
        assert mock_ec2_manager.describe_instances_page.call_count == 3

    def test_deadline(self, mock_ec2_manager):
        mock_ec2_manager.describe_instances_page.return_value = make_page([], next_token="again")
        ticks = itertools.count(start=0, step=20)

        enumerator = InstanceEnumerator(timeout_seconds=50, clock=lambda: next(ticks))

        with pytest.raises(EnumerationLimitError, match="exceeded 50s"):
            enumerator.enumerate(mock_ec2_manager)
        # started=0, checks at 20, 40 pass; 60 fails
        assert mock_ec2_manager.describe_instances_page.call_count == 2
