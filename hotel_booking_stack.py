from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers

STRIPE_SECRET_NAME = "/hotel-booking/stripe-secret-key"


class HotelBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        # Stripe のシークレットキーは事前に Secrets Manager に登録しておく
        stripe_secret = secretsmanager.Secret.from_secret_name_v2(
            self, "StripeSecretKey", STRIPE_SECRET_NAME
        )

        # 認証サービスと共有するセッション署名鍵
        session_secret = secretsmanager.Secret(
            self,
            "SessionSecret",
            secret_name="/hotel-booking/session-secret",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                exclude_punctuation=True,
                password_length=64,
            ),
        )

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            stripe_secret=stripe_secret,
            stripe_publishable_key=self.node.try_get_context("stripe_publishable_key")
            or "",
            currency=self.node.try_get_context("currency") or "USD",
        )

        api = Api(
            self,
            "Api",
            fns=fns,
            session_secret=session_secret,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "SessionSecretArn", value=session_secret.secret_arn)
