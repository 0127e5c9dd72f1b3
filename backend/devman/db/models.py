"""Database models."""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from devman.core.time import utcnow
from devman.db.types import InetType, MacAddrType
from devman.domain.nullable import Network


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class TimestampMixin:
    """Record creation and last update times."""

    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    updated_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False, index=True
    )


class SnmpAuthProto(str, enum.Enum):
    MD5 = "MD5"
    SHA = "SHA"


class SnmpPrivProto(str, enum.Enum):
    DES = "DES"
    AES = "AES"


class SnmpSecLevel(str, enum.Enum):
    NO_AUTH_NO_PRIV = "noAuthNoPriv"
    AUTH_NO_PRIV = "authNoPriv"
    AUTH_PRIV = "authPriv"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Site(TimestampMixin, Base):
    """Physical location devices are installed at."""

    __tablename__ = "sites"

    site_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uident: Mapped[Optional[str]] = mapped_column(String(100), unique=True, nullable=True)
    descr: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    area: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    addr: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    ext_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    ext_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class SnmpCredential(TimestampMixin, Base):
    """SNMP profile; ``auth_pass`` and ``priv_pass`` hold ciphertext."""

    __tablename__ = "snmp_credentials"

    snmp_cred_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    variant: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    auth_name: Mapped[str] = mapped_column(String(100), nullable=False)
    auth_proto: Mapped[Optional[SnmpAuthProto]] = mapped_column(
        Enum(SnmpAuthProto, native_enum=False, values_callable=_enum_values), nullable=True
    )
    auth_pass: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sec_level: Mapped[Optional[SnmpSecLevel]] = mapped_column(
        Enum(SnmpSecLevel, native_enum=False, values_callable=_enum_values), nullable=True
    )
    priv_proto: Mapped[Optional[SnmpPrivProto]] = mapped_column(
        Enum(SnmpPrivProto, native_enum=False, values_callable=_enum_values), nullable=True
    )
    priv_pass: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Device(TimestampMixin, Base):
    """Managed network device."""

    __tablename__ = "devices"

    dev_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    site_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("sites.site_id", ondelete="SET NULL"), nullable=True, index=True
    )
    snmp_main_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("snmp_credentials.snmp_cred_id", ondelete="SET NULL"), nullable=True
    )
    snmp_ro_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("snmp_credentials.snmp_cred_id", ondelete="SET NULL"), nullable=True
    )
    sys_id: Mapped[str] = mapped_column(String(100), nullable=False)
    host_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    ip4_addr: Mapped[Optional[Network]] = mapped_column(InetType, nullable=True)
    ip6_addr: Mapped[Optional[Network]] = mapped_column(InetType, nullable=True)
    sys_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    sys_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    sys_contact: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    sw_version: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    ext_model: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    source: Mapped[str] = mapped_column(String(50), nullable=False, default="api")
    installed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    monitor: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    graph: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    backup: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    unresponsive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class Interface(TimestampMixin, Base):
    """Physical or logical interface of a device."""

    __tablename__ = "interfaces"

    if_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    dev_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("devices.dev_id", ondelete="CASCADE"), nullable=False, index=True
    )
    ifindex: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    descr: Mapped[str] = mapped_column(String(255), nullable=False)
    alias: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    oper: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    adm: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    speed: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    minspeed: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    type_enum: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    mac: Mapped[Optional[str]] = mapped_column(MacAddrType, nullable=True)
    monstatus: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    monerrors: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    monload: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class IpInterface(TimestampMixin, Base):
    """IP address configured on a device."""

    __tablename__ = "ip_interfaces"

    ip_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    dev_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("devices.dev_id", ondelete="CASCADE"), nullable=False, index=True
    )
    ifindex: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    ip_addr: Mapped[Optional[Network]] = mapped_column(InetType, nullable=True)
    descr: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    alias: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class ArchivedInterface(TimestampMixin, Base):
    """Snapshot of an interface kept after its device was removed."""

    __tablename__ = "archived_interfaces"

    ifa_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    hostname: Mapped[str] = mapped_column(String(255), nullable=False)
    host_ip4: Mapped[Optional[Network]] = mapped_column(InetType, nullable=True)
    host_ip6: Mapped[Optional[Network]] = mapped_column(InetType, nullable=True)
    ifindex: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    descr: Mapped[str] = mapped_column(String(255), nullable=False)
    alias: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    mac: Mapped[Optional[str]] = mapped_column(MacAddrType, nullable=True)


class Var(TimestampMixin, Base):
    """Free-form configuration variable keyed by its description."""

    __tablename__ = "vars"

    descr: Mapped[str] = mapped_column(String(100), primary_key=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Credential(TimestampMixin, Base):
    """Generic credential; ``enc_secret`` holds ciphertext (empty when unset)."""

    __tablename__ = "credentials"

    cred_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    username: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    enc_secret: Mapped[str] = mapped_column(Text, nullable=False, default="")


class DeviceCredential(TimestampMixin, Base):
    """Login credential of a device; ``enc_secret`` holds ciphertext."""

    __tablename__ = "device_credentials"
    __table_args__ = (
        UniqueConstraint("dev_id", "username", name="uix_device_credential_dev_username"),
    )

    cred_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    dev_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("devices.dev_id", ondelete="CASCADE"), nullable=False, index=True
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    enc_secret: Mapped[str] = mapped_column(Text, nullable=False, default="")
