import pytest

from swagclient import ContentType, RequestParams, RequestSpec
from swagclient._utils import merge_request_params, resolve_security_params


class TestMergeRequestParams:
    def test_headers_are_unioned_with_security_winning(self):
        base = RequestParams(headers={"X": "1"})
        override = RequestParams(headers={"Y": "2"})
        security = RequestParams(headers={"X": "3"})

        merged = merge_request_params(base, override, security)

        assert merged.headers == {"X": "3", "Y": "2"}

    def test_later_layers_win_for_other_fields(self):
        base = RequestParams(credentials="same-origin", redirect="follow", timeout=5)
        override = RequestParams(credentials="include", timeout=10)
        security = RequestParams(timeout=20)

        merged = merge_request_params(base, override, security)

        assert merged.credentials == "include"
        assert merged.redirect == "follow"
        assert merged.timeout == 20

    def test_unset_fields_do_not_override(self):
        merged = merge_request_params(
            RequestParams(method="POST", referrer_policy="no-referrer"),
            RequestParams(method=None),
        )

        assert merged.method == "POST"
        assert merged.referrer_policy == "no-referrer"
        assert merged.headers == {}

    def test_inputs_are_not_mutated(self):
        base = RequestParams(headers={"X": "1"})
        override = RequestParams(headers={"X": "2"})

        merge_request_params(base, override)

        assert base.headers == {"X": "1"}
        assert override.headers == {"X": "2"}


class TestResolveSecurityParams:
    @pytest.mark.anyio
    async def test_not_secure_skips_worker(self):
        calls = []

        result = await resolve_security_params(
            None, RequestParams(), calls.append, "token"
        )

        assert result is None
        assert calls == []

    @pytest.mark.anyio
    async def test_call_flag_overrides_client_default(self):
        calls = []

        def worker(data):
            calls.append(data)
            return {"headers": {"Authorization": f"Bearer {data}"}}

        skipped = await resolve_security_params(
            False, RequestParams(secure=True), worker, "abc"
        )
        resolved = await resolve_security_params(
            True, RequestParams(secure=False), worker, "abc"
        )

        assert skipped is None
        assert resolved == RequestParams(headers={"Authorization": "Bearer abc"})
        assert calls == ["abc"]

    @pytest.mark.anyio
    async def test_client_default_is_used_when_call_flag_absent(self):
        async def worker(data):
            return RequestParams(headers={"Authorization": data})

        result = await resolve_security_params(
            None, RequestParams(secure=True), worker, "abc"
        )

        assert result == RequestParams(headers={"Authorization": "abc"})

    @pytest.mark.anyio
    async def test_worker_returning_nothing(self):
        result = await resolve_security_params(
            True, RequestParams(), lambda data: None, None
        )

        assert result is None

    @pytest.mark.anyio
    async def test_missing_worker(self):
        assert await resolve_security_params(True, RequestParams(), None, "x") is None

    @pytest.mark.anyio
    async def test_worker_errors_propagate(self):
        async def worker(data):
            raise PermissionError("no session")

        with pytest.raises(PermissionError, match="no session"):
            await resolve_security_params(True, RequestParams(), worker, None)


class TestRequestSpec:
    def test_path_is_required(self):
        with pytest.raises(ValueError):
            RequestSpec(path="")

    def test_with_params_overlays_set_fields(self):
        spec = RequestSpec(
            path="/account",
            method="GET",
            headers={"Accept": "application/json"},
            content_type=ContentType.JSON,
            response_format="json",
        )

        merged = spec.with_params(
            {"headers": {"X-Trace": "1"}, "cancel_token": "list", "secure": True}
        )

        assert merged.path == "/account"
        assert merged.method == "GET"
        assert merged.headers == {"Accept": "application/json", "X-Trace": "1"}
        assert merged.cancel_token == "list"
        assert merged.secure is True
        assert merged.response_format == "json"

    def test_unknown_params_are_rejected(self):
        with pytest.raises(TypeError, match="Unknown request params: bogus"):
            RequestParams.from_value({"bogus": 1})

    def test_to_params_drops_path_query_and_body(self):
        spec = RequestSpec(path="/x", query={"a": 1}, body={"b": 2}, method="PUT")

        params = spec.to_params()

        assert params == RequestParams(method="PUT")
