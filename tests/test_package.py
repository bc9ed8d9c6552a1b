"""Tests for the git_types package surface."""

import git_types


class TestPublicApi:
    """Tests for the names re-exported by git_types."""

    def test_all_names_resolve(self):
        for name in git_types.__all__:
            assert hasattr(git_types, name)

    def test_exports_only_api(self):
        assert set(git_types.__all__) == {
            "BranchName",
            "GitError",
            "GitUrl",
            "InvalidRefName",
            "InvalidUrl",
            "is_valid_git_url",
            "is_valid_reference_name",
        }
        assert not hasattr(git_types, "__version__")

    def test_constructors_are_documented(self):
        assert git_types.GitUrl.__post_init__.__doc__ == "Validate git url."
        assert git_types.BranchName.__post_init__.__doc__ == "Validate branch name."
