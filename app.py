#!/usr/bin/env python3
import aws_cdk as cdk
from stacks.items_stack import ItemsStack

app = cdk.App()
ItemsStack(app, "ItemsStack", synthesizer=cdk.LegacyStackSynthesizer())
app.synth()
