import copy

from relay.config_format.rewriter import rewrite, rewrite_api_url

PREFIX = "https://relay.example.com/?url="


class TestRewriteApiUrl:
    def test_prepends_prefix(self):
        assert (
            rewrite_api_url("https://cj.example.com/api.php", PREFIX)
            == PREFIX + "https://cj.example.com/api.php"
        )

    def test_unwraps_previous_redirect(self):
        assert rewrite_api_url("http://x?url=http://y", "P/") == "P/http://y"

    def test_only_first_marker_is_unwrapped(self):
        assert (
            rewrite_api_url("http://a/?url=http://b/?url=http://c", "P/")
            == "P/http://b/?url=http://c"
        )

    def test_no_double_prefix(self):
        assert rewrite_api_url("P/already", "P/") == "P/already"

    def test_rewriting_twice_is_stable(self):
        once = rewrite_api_url("https://cj.example.com/api.php", PREFIX)
        assert rewrite_api_url(once, PREFIX) == once

    def test_switches_between_relays(self):
        other = "https://other.example.org/?url="
        value = rewrite_api_url(other + "https://cj.example.com/api.php", PREFIX)
        assert value == PREFIX + "https://cj.example.com/api.php"

    def test_empty_prefix_only_unwraps(self):
        assert rewrite_api_url("http://x?url=http://y", "") == "http://y"


class TestRewrite:
    def test_rewrites_api_field(self):
        assert rewrite({"api": "http://x?url=http://y"}, "P/") == {"api": "P/http://y"}

    def test_leaves_already_prefixed_value(self):
        assert rewrite({"api": "P/already"}, "P/") == {"api": "P/already"}

    def test_scalars_unchanged(self):
        for value in (1, 2.5, "http://x", True, False, None):
            assert rewrite(value, "P/") == value

    def test_top_level_string_is_not_rewritten(self):
        assert rewrite("http://x?url=http://y", "P/") == "http://x?url=http://y"

    def test_non_api_keys_untouched(self):
        value = {"detail": "http://x", "apis": "http://y", "API": "http://z"}
        assert rewrite(value, "P/") == value

    def test_non_string_api_value_is_recursed(self):
        value = {"api": {"api": "http://x", "count": 3}}
        assert rewrite(value, "P/") == {"api": {"api": "P/http://x", "count": 3}}

    def test_nested_objects_and_arrays(self, sample_config):
        result = rewrite(sample_config, PREFIX)

        assert result["api_site"]["dyttzy"]["api"] == (
            PREFIX + "http://caiji.dyttzyapi.com/api.php/provide/vod"
        )
        assert result["api_site"]["ruyi"]["api"] == (
            PREFIX + "https://cj.rycjapi.com/api.php/provide/vod"
        )
        assert result["api_site"]["dyttzy"]["detail"] == "http://caiji.dyttzyapi.com"
        assert result["custom_category"] == sample_config["custom_category"]
        assert result["cache_time"] == 7200

    def test_arrays_keep_order_and_length(self):
        value = [{"api": "a"}, 1, [{"api": "b"}], None]
        assert rewrite(value, "P/") == [{"api": "P/a"}, 1, [{"api": "P/b"}], None]

    def test_key_order_preserved(self):
        value = {"z": 1, "api": "a", "m": 2}
        assert list(rewrite(value, "P/")) == ["z", "api", "m"]

    def test_input_is_not_modified(self, sample_config):
        snapshot = copy.deepcopy(sample_config)
        rewrite(sample_config, PREFIX)
        assert sample_config == snapshot

    def test_result_shares_no_containers_with_input(self, sample_config):
        snapshot = copy.deepcopy(sample_config)
        result = rewrite(sample_config, PREFIX)

        result["api_site"]["dyttzy"]["name"] = "changed"
        result["custom_category"][0]["name"] = "changed"
        result["custom_category"].append({"name": "extra"})
        result["api_site"]["new"] = {}

        assert sample_config == snapshot
        assert result["api_site"] is not sample_config["api_site"]
        assert result["custom_category"][0] is not sample_config["custom_category"][0]

    def test_same_document_with_different_prefixes(self, sample_config):
        first = rewrite(sample_config, "https://a.example/?url=")
        second = rewrite(sample_config, "https://b.example/?url=")

        assert first["api_site"]["dyttzy"]["api"].startswith("https://a.example/?url=")
        assert second["api_site"]["dyttzy"]["api"].startswith("https://b.example/?url=")
