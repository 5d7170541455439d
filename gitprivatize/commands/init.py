from gitprivatize.git import add_git_filters, git_dir
from gitprivatize.keystore import KeyStore
from gitprivatize.output import ok, reported_errors


def init():
    """Generate a key and prepare repo to use git-privatize."""
    with reported_errors():
        # NOTE: never overwrite a key we already have
        store = KeyStore.for_git_dir(git_dir())
        store.assert_not_initialized()
        store.initialize()
        add_git_filters()
    ok(f"Initialized key store in {store.path}")
