"""
API configuration module.

Provides configuration for the WeTransfer API client and upload runs.
Open for extension through custom configurations.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Optional, Dict, Any, List, Union
import ssl

from ..session.models import DEFAULT_TOKEN_MAX_AGE


DEFAULT_BASE_URL = 'https://dev.wetransfer.com/v2/'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    Allows customization of SSL behavior for security requirements.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )

        context.check_hostname = self.check_hostname

        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    A timeout on any call aborts the whole upload as NoConnection.
    """
    total: float = 300.0
    connect: float = 30.0
    sock_read: float = 120.0
    sock_connect: float = 30.0

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Centralizes all configuration options for the WeTransfer API client.

    Example:
        >>> config = APIConfig(api_key="secret")
        >>> config.base_url
        'https://dev.wetransfer.com/v2/'
    """
    api_key: str = ''
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = 'wetransferpy/1.0.0'
    token_max_age: timedelta = DEFAULT_TOKEN_MAX_AGE

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    extra_headers: Dict[str, str] = field(default_factory=dict)

    log_level: int = 20  # logging.INFO

    # Connection pool settings
    limit_per_host: int = 2
    limit: int = 10

    def __post_init__(self):
        if not self.base_url.startswith('https://'):
            raise ValueError(f"Only HTTPS endpoints are supported: {self.base_url}")
        if not self.base_url.endswith('/'):
            self.base_url += '/'

    @classmethod
    def default(cls, api_key: str = '') -> 'APIConfig':
        """Create default configuration."""
        return cls(api_key=api_key)

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }


@dataclass
class UploadConfig:
    """
    Inputs of a single upload run.

    Attributes:
        file_paths: Local files to upload, in order
        user: User identifier used to obtain a token
        name: Transfer message / name (transfers only)
        chunk_directory: Directory where part files are written
    """
    file_paths: List[Path]
    user: str
    chunk_directory: Path
    name: Optional[str] = None

    def __post_init__(self):
        """Normalize paths."""
        self.file_paths = [Path(p) for p in (self.file_paths or [])]
        self.chunk_directory = Path(self.chunk_directory)
