"""Tests for the paged S3 listers against a stand-in store client."""

from unittest.mock import call

import pytest
from botocore.exceptions import ClientError
from conftest import BUCKET, FOLDER_MODIFIED, MODIFIED, obj, prefixes

from s3_dirview.core.exceptions import ProtocolContractError, ValidationError
from s3_dirview.objectstorage.listing import (
    ContinuationTokenPagedLister,
    Entry,
    MarkerPagedLister,
    Page,
    create_lister,
)


def make_lister(lister_class, client, placeholder_name=None):
    return lister_class(client, BUCKET, placeholder_name, FOLDER_MODIFIED)


class TestPage:
    """Test reduction of raw list responses to pages."""

    def test_v1_response(self):
        page = Page.from_v1_response(
            {
                "CommonPrefixes": prefixes("a/b/"),
                "Contents": [obj("a/f.txt")],
                "IsTruncated": True,
                "NextMarker": "a/f.txt",
            }
        )
        assert page.common_prefixes == ["a/b/"]
        assert page.objects == [obj("a/f.txt")]
        assert page.is_truncated is True
        assert page.next_cursor == "a/f.txt"

    def test_v2_response_without_optional_fields(self):
        page = Page.from_v2_response({"IsTruncated": False})
        assert page.common_prefixes == []
        assert page.objects == []
        assert page.is_truncated is False
        assert page.next_cursor is None


class TestMarkerPagedLister:
    """Test ListObjects (v1) pagination."""

    def test_single_page(self, store_client):
        """Test folders and files from one page."""
        store_client.list_objects.return_value = {
            "CommonPrefixes": prefixes("a/b/"),
            "Contents": [obj("a/f.txt", size=42)],
            "IsTruncated": False,
        }

        entries = make_lister(MarkerPagedLister, store_client).list("/a")

        assert entries == [
            Entry(name="b", is_folder=True, size=0, modified=FOLDER_MODIFIED),
            Entry(name="f.txt", is_folder=False, size=42, modified=MODIFIED),
        ]
        store_client.list_objects.assert_called_once_with(
            Bucket=BUCKET, Prefix="a/", Delimiter="/", Marker=""
        )

    def test_follows_next_marker(self, store_client):
        """Test a truncated page is followed by a request with its marker."""
        store_client.list_objects.side_effect = [
            {
                "CommonPrefixes": prefixes("dir1/"),
                "Contents": [obj("f1")],
                "IsTruncated": True,
                "NextMarker": "m1",
            },
            {
                "CommonPrefixes": prefixes("dir2/"),
                "Contents": [obj("f2")],
                "IsTruncated": False,
            },
        ]

        entries = make_lister(MarkerPagedLister, store_client).list("/")

        assert [e.name for e in entries] == ["dir1", "f1", "dir2", "f2"]
        assert store_client.list_objects.call_args_list == [
            call(Bucket=BUCKET, Prefix="", Delimiter="/", Marker=""),
            call(Bucket=BUCKET, Prefix="", Delimiter="/", Marker="m1"),
        ]

    @pytest.mark.parametrize("next_marker", [None, ""])
    def test_truncated_without_marker_fails(self, store_client, next_marker):
        """Test truncation without a usable marker stops with an error."""
        response = {
            "Contents": [obj("f1")],
            "IsTruncated": True,
        }
        if next_marker is not None:
            response["NextMarker"] = next_marker
        store_client.list_objects.return_value = response

        with pytest.raises(ProtocolContractError, match="NextMarker"):
            make_lister(MarkerPagedLister, store_client).list("/")

        assert store_client.list_objects.call_count == 1

    def test_missing_truncation_flag_fails(self, store_client):
        """Test a response without IsTruncated is rejected."""
        store_client.list_objects.return_value = {"Contents": [obj("f1")]}

        with pytest.raises(ProtocolContractError, match="IsTruncated"):
            make_lister(MarkerPagedLister, store_client).list("/")

    def test_contract_violation_discards_earlier_pages(self, store_client):
        """Test no partial result is returned after later pages fail."""
        store_client.list_objects.side_effect = [
            {"Contents": [obj("f1")], "IsTruncated": True, "NextMarker": "f1"},
            {"Contents": [obj("f2")], "IsTruncated": True},
        ]

        lister = make_lister(MarkerPagedLister, store_client)
        with pytest.raises(ProtocolContractError):
            lister.list("/")

        assert store_client.list_objects.call_count == 2

    def test_store_error_propagates(self, store_client):
        """Test store errors reach the caller unchanged."""
        error = ClientError(
            {"Error": {"Code": "NoSuchBucket", "Message": "missing"}}, "ListObjects"
        )
        store_client.list_objects.side_effect = error

        with pytest.raises(ClientError) as exc_info:
            make_lister(MarkerPagedLister, store_client).list("/")

        assert exc_info.value is error


class TestContinuationTokenPagedLister:
    """Test ListObjectsV2 pagination."""

    def test_first_request_has_no_cursor(self, store_client):
        store_client.list_objects_v2.return_value = {"IsTruncated": False}

        entries = make_lister(ContinuationTokenPagedLister, store_client).list("/a/b")

        assert entries == []
        store_client.list_objects_v2.assert_called_once_with(
            Bucket=BUCKET, Prefix="a/b/", Delimiter="/"
        )

    def test_follows_continuation_token(self, store_client):
        store_client.list_objects_v2.side_effect = [
            {
                "Contents": [obj("a/f1")],
                "IsTruncated": True,
                "NextContinuationToken": "token-1",
            },
            {"Contents": [obj("a/f2")], "IsTruncated": False},
        ]

        entries = make_lister(ContinuationTokenPagedLister, store_client).list("/a")

        assert [e.name for e in entries] == ["f1", "f2"]
        assert store_client.list_objects_v2.call_args_list[1] == call(
            Bucket=BUCKET, Prefix="a/", Delimiter="/", ContinuationToken="token-1"
        )

    def test_falls_back_to_start_after(self, store_client):
        """Test truncation without a token resumes after the last key."""
        store_client.list_objects_v2.side_effect = [
            {"Contents": [obj("a/f1"), obj("a/f2")], "IsTruncated": True},
            {"Contents": [obj("a/f3")], "IsTruncated": False},
        ]

        entries = make_lister(ContinuationTokenPagedLister, store_client).list("/a")

        assert [e.name for e in entries] == ["f1", "f2", "f3"]
        assert store_client.list_objects_v2.call_args_list[1] == call(
            Bucket=BUCKET, Prefix="a/", Delimiter="/", StartAfter="a/f2"
        )

    def test_truncated_empty_page_stops(self, store_client):
        """Test a truncated page with no objects and no token ends the listing."""
        store_client.list_objects_v2.return_value = {
            "CommonPrefixes": prefixes("a/sub/"),
            "IsTruncated": True,
        }

        entries = make_lister(ContinuationTokenPagedLister, store_client).list("/a")

        assert [e.name for e in entries] == ["sub"]
        assert store_client.list_objects_v2.call_count == 1

    def test_store_error_propagates(self, store_client):
        store_client.list_objects_v2.side_effect = [
            {"Contents": [obj("f1")], "IsTruncated": True, "NextContinuationToken": "t"},
            ClientError({"Error": {"Code": "AccessDenied"}}, "ListObjectsV2"),
        ]

        with pytest.raises(ClientError):
            make_lister(ContinuationTokenPagedLister, store_client).list("/")


class TestPlaceholderFiltering:
    """Test placeholder objects never surface in listings."""

    @pytest.mark.parametrize(
        "lister_class, method, cursor",
        [
            (MarkerPagedLister, "list_objects", {"NextMarker": "m1"}),
            (ContinuationTokenPagedLister, "list_objects_v2", {}),
        ],
    )
    def test_placeholder_dropped_on_every_page(
        self, store_client, lister_class, method, cursor
    ):
        getattr(store_client, method).side_effect = [
            {
                "Contents": [obj("a/.placeholder"), obj("a/f1")],
                "IsTruncated": True,
                **cursor,
            },
            {
                "Contents": [obj("a/f2"), obj("a/.placeholder")],
                "IsTruncated": False,
            },
        ]

        entries = make_lister(lister_class, store_client).list("/a")

        assert [e.name for e in entries] == ["f1", "f2"]

    def test_configured_placeholder_name(self, store_client):
        store_client.list_objects.return_value = {
            "Contents": [obj("a/.keep"), obj("a/.placeholder")],
            "IsTruncated": False,
        }

        entries = make_lister(MarkerPagedLister, store_client, ".keep").list("/a")

        assert [e.name for e in entries] == [".placeholder"]


class TestCreateLister:
    """Test lister selection by protocol version."""

    def test_v1(self, store_client):
        lister = create_lister("v1", store_client, BUCKET, None, FOLDER_MODIFIED)
        assert isinstance(lister, MarkerPagedLister)
        assert lister.placeholder_name == ".placeholder"

    def test_v2(self, store_client):
        lister = create_lister("v2", store_client, BUCKET, ".keep", FOLDER_MODIFIED)
        assert isinstance(lister, ContinuationTokenPagedLister)
        assert lister.placeholder_name == ".keep"

    def test_unknown_version(self, store_client):
        with pytest.raises(ValidationError, match="must be 'v1' or 'v2'"):
            create_lister("v3", store_client, BUCKET, None, FOLDER_MODIFIED)
