import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Match, Template

from stacks.items_stack import ItemsStack


@pytest.fixture(scope="module")
def template():
    app = cdk.App()
    return Template.from_stack(ItemsStack(app, "TestItemsStack"))


def _actions(policy):
    found = set()
    for statement in policy["Properties"]["PolicyDocument"]["Statement"]:
        action = statement["Action"]
        found.update([action] if isinstance(action, str) else action)
    return found


def test_key_rotation(template):
    template.has_resource_properties("AWS::KMS::Key", {"EnableKeyRotation": True})


def test_table(template):
    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.has_resource("AWS::DynamoDB::Table", {
        "DeletionPolicy": "Delete",
        "Properties": Match.object_like({
            "TableName": "items",
            "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
            "AttributeDefinitions": [{"AttributeName": "id", "AttributeType": "S"}],
            "BillingMode": "PAY_PER_REQUEST",
            "PointInTimeRecoverySpecification": {"PointInTimeRecoveryEnabled": True},
            "SSESpecification": Match.object_like({"SSEEnabled": True, "SSEType": "KMS"}),
        }),
    })


def test_functions(template):
    template.resource_count_is("AWS::Lambda::Function", 2)
    for handler in ("items_api.read_item.handler", "items_api.write_item.handler"):
        template.has_resource_properties("AWS::Lambda::Function", {
            "Handler": handler,
            "Timeout": 5,
            "Environment": {"Variables": Match.object_like({"TABLE_NAME": Match.any_value()})},
        })


def test_least_privilege(template):
    policies = template.find_resources("AWS::IAM::Policy")
    action_sets = [_actions(p) for p in policies.values()]
    reader = next(a for a in action_sets if "dynamodb:GetItem" in a)
    writer = next(a for a in action_sets if "dynamodb:PutItem" in a)
    assert reader == {"dynamodb:GetItem", "kms:Decrypt"}
    assert "dynamodb:GetItem" not in writer
    assert "kms:Decrypt" not in writer
    assert "kms:Encrypt" in writer
    assert not any(a.startswith("dynamodb:") and a != "dynamodb:PutItem" for a in writer)


def test_methods_need_iam_and_api_key(template):
    template.resource_count_is("AWS::ApiGateway::Method", 2)
    for verb in ("GET", "POST"):
        template.has_resource_properties("AWS::ApiGateway::Method", {
            "HttpMethod": verb,
            "AuthorizationType": "AWS_IAM",
            "ApiKeyRequired": True,
        })
    template.has_resource_properties("AWS::ApiGateway::Resource", {"PathPart": "items"})
    template.has_resource_properties("AWS::ApiGateway::Resource", {"PathPart": "{id}"})


def test_usage_plan(template):
    template.has_resource_properties("AWS::ApiGateway::UsagePlan", {
        "Throttle": {"RateLimit": 10, "BurstLimit": 20},
        "Quota": {"Limit": 1000, "Period": "MONTH"},
    })
    template.resource_count_is("AWS::ApiGateway::ApiKey", 1)
    template.resource_count_is("AWS::ApiGateway::UsagePlanKey", 1)


def test_context_overrides():
    app = cdk.App(context={"rateLimit": 50, "burstLimit": 100, "monthlyQuota": 5000, "tableName": "items-dev"})
    t = Template.from_stack(ItemsStack(app, "TunedItemsStack"))
    t.has_resource_properties("AWS::ApiGateway::UsagePlan", {
        "Throttle": {"RateLimit": 50, "BurstLimit": 100},
        "Quota": {"Limit": 5000, "Period": "MONTH"},
    })
    t.has_resource_properties("AWS::DynamoDB::Table", {"TableName": "items-dev"})


def test_dashboard(template):
    template.resource_count_is("AWS::CloudWatch::Dashboard", 1)
    template.has_resource_properties("AWS::CloudWatch::Dashboard", {"DashboardName": "Items-Service"})


def test_outputs(template):
    for name in ("ApiUrl", "ApiKeyId", "TableName", "KeyArn"):
        template.has_output(name, {"Value": Match.any_value()})
