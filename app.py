#!/usr/bin/env python3

import aws_cdk as cdk

from airline_reservation_stack import AirlineReservationStack

app = cdk.App()
AirlineReservationStack(
    app,
    "AirlineReservationStack",
)

app.synth()
