#!/usr/bin/env python3

import aws_cdk as cdk

from bus_trip_catalog_stack import BusTripCatalogStack

app = cdk.App()
BusTripCatalogStack(
    app,
    "BusTripCatalogStack",
)

app.synth()
