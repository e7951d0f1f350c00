from governance.client.decoding import DaoClientDecoding
from governance.client.encoding import DaoClientEncoding
from governance.client.estimation import DaoClientEstimation
from governance.client.methods import DaoClientMethods
from governance.context import Context
from governance.core import ClientCore


class DaoClient(ClientCore):
    """
    Client for the DAO itself.

    - methods: DAO creation, deposits, plugin setup preparation and DAO reads
    - encoding / decoding: actions a proposal can execute on the DAO
    - estimation: gas fees of the write methods
    """

    def __init__(self, context: Context):
        super().__init__(context)
        self.methods = DaoClientMethods(context)
        self.encoding = DaoClientEncoding(context)
        self.decoding = DaoClientDecoding(context)
        self.estimation = DaoClientEstimation(context)
