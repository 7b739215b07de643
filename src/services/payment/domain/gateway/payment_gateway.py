from abc import ABC, abstractmethod
from collections.abc import Mapping

from services.payment.domain.value_object import PaymentIntent, PaymentIntentSnapshot


class PaymentGateway(ABC):
    """決済代行サービスのアダプタ境界

    業務ロジックは持たず、値の変換のみを行う。
    """

    @abstractmethod
    def create_intent(
        self,
        amount_minor_units: int,
        currency: str,
        metadata: Mapping[str, str],
    ) -> PaymentIntent:
        """PaymentIntent を作成する

        Raises:
            GatewayUnavailableException: 通信失敗・タイムアウト・5xx
            GatewayRejectedException: 4xx（不正な通貨など）
        """
        raise NotImplementedError

    @abstractmethod
    def retrieve_intent(self, intent_id: str) -> PaymentIntentSnapshot:
        """PaymentIntent の状態を照会する

        Raises:
            ResourceNotFoundException: 未知の intent_id
        """
        raise NotImplementedError
