import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs.layers import LAMBDA_RUNTIME


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        stripe_secret: secretsmanager.ISecret,
        stripe_publishable_key: str,
        currency: str,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._common_layer = common_layer
        self._environment = {
            "TABLE_NAME": table.table_name,
            # デプロイ時に CloudFormation の動的参照で解決される
            "STRIPE_SECRET_KEY": stripe_secret.secret_value.unsafe_unwrap(),
            "STRIPE_PUBLISHABLE_KEY": stripe_publishable_key,
            "CURRENCY": currency,
            "EXTERNAL_CALL_TIMEOUT_SECONDS": "10",
            "POWERTOOLS_LOG_LEVEL": "INFO",
            "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }

        # 書き込みを伴う関数
        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            "booking-service",
        )
        self.submit_review = self._create_function(
            "SubmitReviewLambda",
            "services.review.handlers.create.lambda_handler",
            "review-service",
        )
        for fn in [self.create_booking, self.submit_review]:
            table.grant_read_write_data(fn)

        # 参照のみの関数
        self.list_my_bookings = self._create_function(
            "ListMyBookingsLambda",
            "services.booking.handlers.list_mine.lambda_handler",
            "booking-service",
        )
        self.get_booking = self._create_function(
            "GetBookingLambda",
            "services.booking.handlers.get.lambda_handler",
            "booking-service",
        )
        self.confirm_payment = self._create_function(
            "ConfirmPaymentLambda",
            "services.payment.handlers.confirm.lambda_handler",
            "payment-service",
        )
        self.stripe_config = self._create_function(
            "StripeConfigLambda",
            "services.payment.handlers.stripe_config.lambda_handler",
            "payment-service",
        )
        self.list_hotels = self._create_function(
            "ListHotelsLambda",
            "services.catalog.handlers.list_hotels.lambda_handler",
            "catalog-service",
        )
        self.get_hotel = self._create_function(
            "GetHotelLambda",
            "services.catalog.handlers.get_hotel.lambda_handler",
            "catalog-service",
        )
        self.list_rooms = self._create_function(
            "ListRoomsLambda",
            "services.catalog.handlers.list_rooms.lambda_handler",
            "catalog-service",
        )
        self.list_hotel_reviews = self._create_function(
            "ListHotelReviewsLambda",
            "services.review.handlers.list_by_hotel.lambda_handler",
            "review-service",
        )
        self.list_my_reviews = self._create_function(
            "ListMyReviewsLambda",
            "services.review.handlers.list_mine.lambda_handler",
            "review-service",
        )
        for fn in [
            self.list_my_bookings,
            self.get_booking,
            self.confirm_payment,
            self.list_hotels,
            self.get_hotel,
            self.list_rooms,
            self.list_hotel_reviews,
            self.list_my_reviews,
        ]:
            table.grant_read_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=LAMBDA_RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            # Stripe と DynamoDB を1回ずつ呼ぶ（各10秒まで）
            timeout=Duration.seconds(30),
            memory_size=512,
            environment={
                **self._environment,
                "POWERTOOLS_SERVICE_NAME": service_name,
            },
        )
