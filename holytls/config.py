"""Client configuration for Chrome impersonation and runtime statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import List, Optional


class ChromeVersion(IntEnum):
    """Chrome release whose fingerprint is impersonated."""

    CHROME_120 = 120
    CHROME_125 = 125
    CHROME_130 = 130
    CHROME_131 = 131
    CHROME_143 = 143
    LATEST = 143


@dataclass
class TlsConfig:
    """TLS settings for Chrome impersonation."""

    chrome_version: ChromeVersion = ChromeVersion.LATEST
    verify_certificates: bool = True
    ca_bundle_path: str = ""
    client_cert_path: str = ""
    client_key_path: str = ""
    enable_session_cache: bool = True
    session_cache_size: int = 1024
    enable_early_data: bool = True
    permute_extensions: bool = True
    cipher_override: List[str] = field(default_factory=list)


@dataclass
class Http2Config:
    """HTTP/2 settings; ``None`` overrides mean Chrome defaults."""

    chrome_version: ChromeVersion = ChromeVersion.LATEST
    header_table_size: Optional[int] = None
    max_concurrent_streams: Optional[int] = None
    initial_window_size: Optional[int] = None
    max_frame_size: Optional[int] = None
    max_header_list_size: Optional[int] = None
    connection_window_size: Optional[int] = None


@dataclass
class PoolConfig:
    """Connection pool limits and timeouts."""

    max_connections_per_host: int = 6
    max_total_connections: int = 256
    idle_timeout: timedelta = timedelta(milliseconds=300000)
    connect_timeout: timedelta = timedelta(milliseconds=30000)
    enable_multiplexing: bool = True
    max_streams_per_connection: int = 100
    keepalive_interval: timedelta = timedelta(milliseconds=45000)


@dataclass
class ThreadConfig:
    """Worker thread settings; zero workers means one per CPU core."""

    num_workers: int = 0
    pin_to_cores: bool = False


@dataclass
class DnsConfig:
    """DNS resolution settings."""

    servers: List[str] = field(default_factory=list)
    timeout: timedelta = timedelta(milliseconds=5000)
    cache_ttl: timedelta = timedelta(seconds=60)


@dataclass
class ClientConfig:
    """Top-level client configuration."""

    tls: TlsConfig = field(default_factory=TlsConfig)
    http2: Http2Config = field(default_factory=Http2Config)
    pool: PoolConfig = field(default_factory=PoolConfig)
    threads: ThreadConfig = field(default_factory=ThreadConfig)
    dns: DnsConfig = field(default_factory=DnsConfig)
    default_timeout: timedelta = timedelta(milliseconds=30000)
    user_agent: str = ""
    follow_redirects: bool = True
    max_redirects: int = 10
    auto_decompress: bool = True

    @classmethod
    def for_version(cls, version: ChromeVersion) -> "ClientConfig":
        """Default configuration impersonating the given Chrome version."""
        version = ChromeVersion(version)
        config = cls()
        config.tls.chrome_version = version
        config.http2.chrome_version = version
        return config

    @classmethod
    def chrome120(cls) -> "ClientConfig":
        return cls.for_version(ChromeVersion.CHROME_120)

    @classmethod
    def chrome125(cls) -> "ClientConfig":
        return cls.for_version(ChromeVersion.CHROME_125)

    @classmethod
    def chrome130(cls) -> "ClientConfig":
        return cls.for_version(ChromeVersion.CHROME_130)

    @classmethod
    def chrome131(cls) -> "ClientConfig":
        return cls.for_version(ChromeVersion.CHROME_131)

    @classmethod
    def chrome143(cls) -> "ClientConfig":
        return cls.for_version(ChromeVersion.CHROME_143)

    @classmethod
    def chrome_latest(cls) -> "ClientConfig":
        return cls.for_version(ChromeVersion.LATEST)


@dataclass
class ClientStats:
    """Runtime counters and average latencies of a client."""

    total_connections: int = 0
    active_connections: int = 0
    idle_connections: int = 0
    connections_created: int = 0
    connections_reused: int = 0
    connections_failed: int = 0
    requests_sent: int = 0
    requests_completed: int = 0
    requests_failed: int = 0
    requests_timeout: int = 0
    bytes_sent: int = 0
    bytes_received: int = 0
    avg_dns_time_ms: float = 0.0
    avg_connect_time_ms: float = 0.0
    avg_tls_time_ms: float = 0.0
    avg_ttfb_ms: float = 0.0
    avg_total_time_ms: float = 0.0