"""Auth: Lister endpoint.

Lists datasets, groups, users, accesses and registered web service endpoints
of an OSF instance.
"""

from osfclient.core import context
from osfclient.endpoints.base import run

JSON = "application/json"

DATASETS = "datasets"
WS = "ws"
GROUPS = "groups"
GROUP_USERS = "group_users"
USER_GROUPS = "user_groups"
ACCESS_USER = "access_user"
ACCESS_DATASET = "access_dataset"
ACCESS_GROUP = "access_group"

MODES = (DATASETS, WS, GROUPS, GROUP_USERS, USER_GROUPS, ACCESS_USER, ACCESS_DATASET, ACCESS_GROUP)

# Modes that need a dataset or group URI.
_DATASET_MODES = (ACCESS_DATASET,)
_GROUP_MODES = (ACCESS_GROUP, GROUP_USERS)


def lister(ctx, mode=DATASETS, uri=None, target_webservice="all", **overrides):
    """Auth: Lister query.

    Args:
        mode: One of `MODES`.
        uri: Dataset URI for `access_dataset`, group URI for `access_group`
            and `group_users`.
        target_webservice: `"all"`, `"none"` or one web service endpoint URI
            to include in access listings.
    """
    if mode not in MODES:
        raise ValueError(f"unknown lister mode: {mode!r}")

    params = {"mode": mode, "target_webservice": target_webservice}
    if mode in _DATASET_MODES:
        params["dataset"] = uri
    elif mode in _GROUP_MODES:
        params["group"] = uri

    defaults = context.merge_options(context.get(), context.mime(JSON))
    return run(ctx, "/ws/auth/lister/", defaults, params, **overrides)
