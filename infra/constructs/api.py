from aws_cdk import Duration
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs.functions import Functions
from infra.constructs.layers import LAMBDA_RUNTIME


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        fns: Functions,
        session_secret: secretsmanager.ISecret,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "HotelBookingRestApi",
            rest_api_name="Hotel Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
        )

        # Lambda Authorizer: session Cookie の署名と有効期限を検証する
        authorizer_fn = _lambda.Function(
            self,
            "SessionAuthorizerFn",
            runtime=LAMBDA_RUNTIME,
            handler="authorizer.handler.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            environment={
                "SESSION_SECRET_ARN": session_secret.secret_arn,
            },
        )
        session_secret.grant_read(authorizer_fn)

        authorizer = apigw.RequestAuthorizer(
            self,
            "SessionAuthorizer",
            handler=authorizer_fn,
            identity_sources=[apigw.IdentitySource.header("Cookie")],
            results_cache_ttl=Duration.seconds(300),
        )

        api = self.rest_api.root.add_resource("api")

        # /api/bookings
        bookings = api.add_resource("bookings")
        bookings.add_method(
            "POST",
            apigw.LambdaIntegration(fns.create_booking),
            authorizer=authorizer,
        )
        bookings.add_resource("my-bookings").add_method(
            "GET",
            apigw.LambdaIntegration(fns.list_my_bookings),
            authorizer=authorizer,
        )
        bookings.add_resource("{id}").add_method(
            "GET",
            apigw.LambdaIntegration(fns.get_booking),
            authorizer=authorizer,
        )

        # /api/user/bookings（my-bookings の別名）
        api.add_resource("user").add_resource("bookings").add_method(
            "GET",
            apigw.LambdaIntegration(fns.list_my_bookings),
            authorizer=authorizer,
        )

        # /api/payments/confirm
        api.add_resource("payments").add_resource("confirm").add_method(
            "POST",
            apigw.LambdaIntegration(fns.confirm_payment),
            authorizer=authorizer,
        )

        # /api/hotels（認証不要）
        hotels = api.add_resource("hotels")
        hotels.add_method("GET", apigw.LambdaIntegration(fns.list_hotels))
        hotel = hotels.add_resource("{id}")
        hotel.add_method("GET", apigw.LambdaIntegration(fns.get_hotel))
        hotel.add_resource("rooms").add_method(
            "GET", apigw.LambdaIntegration(fns.list_rooms)
        )
        hotel.add_resource("reviews").add_method(
            "GET", apigw.LambdaIntegration(fns.list_hotel_reviews)
        )

        # /api/reviews
        reviews = api.add_resource("reviews")
        reviews.add_method(
            "POST",
            apigw.LambdaIntegration(fns.submit_review),
            authorizer=authorizer,
        )
        reviews.add_resource("my-reviews").add_method(
            "GET",
            apigw.LambdaIntegration(fns.list_my_reviews),
            authorizer=authorizer,
        )

        # /api/stripe/config（認証不要）
        api.add_resource("stripe").add_resource("config").add_method(
            "GET", apigw.LambdaIntegration(fns.stripe_config)
        )

