from pathlib import Path

from constructs import Construct
from aws_cdk import (
    Stack, Duration, CfnOutput, RemovalPolicy,
    aws_apigateway as apigw,
    aws_cloudwatch as cloudwatch,
    aws_dynamodb as dynamodb,
    aws_kms as kms,
    aws_lambda as lambda_,
)

LAMBDA_DIR = Path(__file__).resolve().parent.parent / "lambda"

DEFAULTS = {
    "tableName": "items",
    "rateLimit": 10,
    "burstLimit": 20,
    "monthlyQuota": 1000,
    "handlerTimeoutSeconds": 5,
    "logLevel": "INFO",
    "metricsNamespace": "ItemsService",
    "dashboardName": "Items-Service",
}


class ItemsStack(Stack):
    """Infra: KMS key + DynamoDB table + read/write Lambdas + REST API + Dashboard.
    The API requires IAM (SigV4) auth and an API key; the usage plan throttles
    and caps each key. Tunables come from CDK context, e.g. -c rateLimit=50.
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # --------- Encryption ----------
        key = kms.Key(
            self, "Key",
            enable_key_rotation=True,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # --------- Database ----------
        # Sample deployment: the table goes away with the stack.
        table = dynamodb.Table(
            self, "ItemsTable",
            table_name=self._ctx("tableName"),
            partition_key=dynamodb.Attribute(name="id", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
            point_in_time_recovery_specification=dynamodb.PointInTimeRecoverySpecification(
                point_in_time_recovery_enabled=True,
            ),
            encryption=dynamodb.TableEncryption.CUSTOMER_MANAGED,
            encryption_key=key,
        )

        # --------- Lambdas ----------
        environment = {
            "TABLE_NAME": table.table_name,
            "LOG_LEVEL": self._ctx("logLevel"),
            "METRICS_NAMESPACE": self._ctx("metricsNamespace"),
        }
        code = lambda_.Code.from_asset(
            str(LAMBDA_DIR), exclude=["**/__pycache__", "**/*.pyc"],
        )
        timeout = Duration.seconds(int(self._ctx("handlerTimeoutSeconds")))

        read_fn = lambda_.Function(
            self, "ReadItemFunction",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="items_api.read_item.handler",
            timeout=timeout,
            memory_size=256,
            environment=environment,
            code=code,
        )
        write_fn = lambda_.Function(
            self, "WriteItemFunction",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="items_api.write_item.handler",
            timeout=timeout,
            memory_size=256,
            environment=environment,
            code=code,
        )

        # Least privilege: one table action and one key direction per function.
        table.grant(read_fn, "dynamodb:GetItem")
        table.grant(write_fn, "dynamodb:PutItem")
        key.grant_decrypt(read_fn)
        key.grant_encrypt(write_fn)

        # --------- API ----------
        api = apigw.RestApi(
            self, "ItemsApi",
            rest_api_name="Items Service",
            description="Items API: GET /items/{id} and POST /items",
            default_method_options=apigw.MethodOptions(
                authorization_type=apigw.AuthorizationType.IAM,
            ),
        )

        api_key = apigw.ApiKey(
            self, "ApiKey",
            enabled=True,
            description="API Key for the Items Service",
        )
        usage_plan = apigw.UsagePlan(
            self, "UsagePlan",
            name="Usage Plan",
            description="Standard usage plan for Items API",
            api_stages=[apigw.UsagePlanPerApiStage(api=api, stage=api.deployment_stage)],
            throttle=apigw.ThrottleSettings(
                rate_limit=int(self._ctx("rateLimit")),
                burst_limit=int(self._ctx("burstLimit")),
            ),
            quota=apigw.QuotaSettings(
                limit=int(self._ctx("monthlyQuota")),
                period=apigw.Period.MONTH,
            ),
        )
        usage_plan.add_api_key(api_key)

        method_options = dict(
            api_key_required=True,
            authorization_type=apigw.AuthorizationType.IAM,
        )
        items = api.root.add_resource("items")
        item = items.add_resource("{id}")
        item.add_method("GET", apigw.LambdaIntegration(read_fn), **method_options)
        items.add_method("POST", apigw.LambdaIntegration(write_fn), **method_options)

        # --------- Monitoring ----------
        minute = Duration.minutes(1)
        dash = cloudwatch.Dashboard(self, "Dashboard", dashboard_name=self._ctx("dashboardName"))
        dash.add_widgets(
            cloudwatch.GraphWidget(
                title="Lambda Invocations",
                left=[
                    read_fn.metric_invocations(period=minute, statistic="Sum", label="Read"),
                    write_fn.metric_invocations(period=minute, statistic="Sum", label="Write"),
                ],
            ),
            cloudwatch.GraphWidget(
                title="Lambda Errors & Throttles",
                left=[
                    read_fn.metric_errors(period=minute, statistic="Sum", label="Read errors"),
                    write_fn.metric_errors(period=minute, statistic="Sum", label="Write errors"),
                    read_fn.metric_throttles(period=minute, statistic="Sum", label="Read throttles"),
                    write_fn.metric_throttles(period=minute, statistic="Sum", label="Write throttles"),
                ],
            ),
            cloudwatch.GraphWidget(
                title="Lambda Duration (p95)",
                left=[
                    read_fn.metric_duration(period=minute, statistic="p95", label="Read"),
                    write_fn.metric_duration(period=minute, statistic="p95", label="Write"),
                ],
            ),
            cloudwatch.GraphWidget(
                title="API 4XX / 5XX",
                left=[
                    api.metric_client_error(period=minute, statistic="Sum"),
                    api.metric_server_error(period=minute, statistic="Sum"),
                ],
            ),
        )

        # --------- Outputs ----------
        CfnOutput(self, "ApiUrl", value=api.url)
        CfnOutput(self, "ApiKeyId", value=api_key.key_id)
        CfnOutput(self, "TableName", value=table.table_name)
        CfnOutput(self, "KeyArn", value=key.key_arn)

    def _ctx(self, name: str):
        value = self.node.try_get_context(name)
        return DEFAULTS[name] if value is None else value
