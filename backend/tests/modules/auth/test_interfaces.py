from datetime import timedelta

from modules.auth.codec import CredentialCodec
from modules.auth.interfaces import ICredentialCodec, ICredentialTransport
from modules.auth.models import CodecConfig
from modules.auth.transports import CookieTransport, HeaderTransport


class TestAuthInterfaces:
    def test_codec_implements_interface(self):
        """CredentialCodec should satisfy ICredentialCodec."""
        codec = CredentialCodec(CodecConfig(secret="s3cret", ttl=timedelta(minutes=5)))
        assert isinstance(codec, ICredentialCodec)

    def test_codec_interface_methods_exist(self):
        for method in ["mint", "verify", "refresh"]:
            assert hasattr(ICredentialCodec, method)
            assert callable(getattr(CredentialCodec, method))

    def test_transports_implement_interface(self):
        """Both transports should satisfy ICredentialTransport."""
        assert isinstance(HeaderTransport(), ICredentialTransport)
        assert isinstance(CookieTransport(), ICredentialTransport)

    def test_transport_names(self):
        assert HeaderTransport().name == "header"
        assert CookieTransport().name == "cookie"
