from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


class Database(Construct):
    """DynamoDB Construct

    ホテル・客室・予約・レビューを1テーブルに格納する（PK/SK + GSI1）。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        pitr = dynamodb.PointInTimeRecoverySpecification(
            point_in_time_recovery_enabled=True
        )
        self.table = dynamodb.Table(
            self,
            "HotelBookingTable",
            partition_key=dynamodb.Attribute(
                name="PK", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(name="SK", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery_specification=pitr,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # 予約の PaymentIntent 逆引き・ホテル別の客室/レビュー一覧
        self.table.add_global_secondary_index(
            index_name="GSI1",
            partition_key=dynamodb.Attribute(
                name="GSI1PK", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(
                name="GSI1SK", type=dynamodb.AttributeType.STRING
            ),
        )
