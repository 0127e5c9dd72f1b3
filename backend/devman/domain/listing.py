"""Filter keys accepted by each listing endpoint."""

from devman.domain.filters import (
    ISEMPTY,
    ISNULL,
    FilterSpec,
    at_least,
    at_most,
    boolean,
    exact,
    ilike,
    like,
    mac,
    network,
)

NULLABLE = (ISNULL, ISEMPTY)

SITE_FILTERS = FilterSpec(
    fields=(
        ilike("descr_f", sentinels=(ISEMPTY,)),
        ilike("uident_f", sentinels=NULLABLE),
        ilike("area_f", sentinels=NULLABLE),
        ilike("addr_f", sentinels=NULLABLE),
        ilike("notes_f", sentinels=NULLABLE),
        like("ext_id_f", numeric=True, sentinels=(ISNULL,)),
        ilike("ext_name_f", sentinels=NULLABLE),
    )
)

DEVICE_FILTERS = FilterSpec(
    fields=(
        exact("site_id_f", numeric=True, sentinels=(ISNULL,)),
        like("sys_id_f"),
        ilike("host_name_f"),
        ilike("sys_name_f", sentinels=NULLABLE),
        ilike("sys_location_f", sentinels=NULLABLE),
        ilike("sys_contact_f", sentinels=NULLABLE),
        ilike("sw_version_f", sentinels=NULLABLE),
        ilike("ext_model_f", sentinels=NULLABLE),
        ilike("notes_f", sentinels=NULLABLE),
        ilike("source_f"),
        network("ip4_addr_f"),
        network("ip6_addr_f"),
        boolean("installed_f"),
        boolean("monitor_f"),
        boolean("graph_f"),
        boolean("backup_f"),
        boolean("unresponsive_f"),
    )
)

INTERFACE_FILTERS = FilterSpec(
    fields=(
        exact("dev_id_f", numeric=True),
        like("ifindex_f", numeric=True, sentinels=(ISNULL,)),
        ilike("descr_f"),
        ilike("alias_f", sentinels=NULLABLE),
        like("oper_f", numeric=True, sentinels=(ISNULL,)),
        like("adm_f", numeric=True, sentinels=(ISNULL,)),
        like("speed_f", numeric=True, sentinels=(ISNULL,)),
        like("minspeed_f", numeric=True, sentinels=(ISNULL,)),
        like("type_enum_f", numeric=True, sentinels=(ISNULL,)),
        mac("mac_f"),
        boolean("monstatus_f"),
        boolean("monerrors_f"),
        boolean("monload_f"),
        at_least("speed_ge", "speed"),
        at_most("speed_le", "speed"),
    )
)

IP_INTERFACE_FILTERS = FilterSpec(
    fields=(
        exact("dev_id_f", numeric=True),
        like("ifindex_f", numeric=True, sentinels=(ISNULL,)),
        network("ip_addr_f"),
        ilike("descr_f", sentinels=NULLABLE),
        ilike("alias_f", sentinels=NULLABLE),
    )
)

ARCHIVED_INTERFACE_FILTERS = FilterSpec(
    fields=(
        ilike("hostname_f"),
        network("host_ip4_f"),
        network("host_ip6_f"),
        like("ifindex_f", numeric=True),
        ilike("descr_f"),
        ilike("alias_f"),
        mac("mac_f"),
    ),
    default_limit=1000,
)

VAR_FILTERS = FilterSpec(
    fields=(
        ilike("descr_f"),
        ilike("content_f", sentinels=NULLABLE),
        ilike("notes_f", sentinels=NULLABLE),
    )
)

CREDENTIAL_FILTERS = FilterSpec(
    fields=(
        like("label_f"),
        like("username_f", sentinels=NULLABLE),
    )
)

DEVICE_CREDENTIAL_FILTERS = FilterSpec(
    fields=(
        exact("dev_id_f", numeric=True),
        like("username_f"),
    )
)

SNMP_CREDENTIAL_FILTERS = FilterSpec(
    fields=(
        like("label_f"),
        exact("variant_f", numeric=True),
        like("auth_name_f"),
    )
)
