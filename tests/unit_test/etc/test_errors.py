from userlist_sync.etc.errors import UserListSyncException, NetworkRequestFailedException, \
    HttpStatusException, ResponseDecodeException, ConfigurationParsingException, \
    RequestBuildException


class TestErrors:
    def test_defaults(self):
        e = NetworkRequestFailedException()

        assert isinstance(e, UserListSyncException)
        assert e.message == 'Network request failed.'
        assert e.status_code == 502

    def test_status_carried(self):
        e = HttpStatusException('Not found', status_code=404)

        assert e.status_code == 404
        assert str(e) == 'Not found'

    def test_hierarchy(self):
        for cls in (ResponseDecodeException, ConfigurationParsingException, RequestBuildException):
            assert issubclass(cls, UserListSyncException)
