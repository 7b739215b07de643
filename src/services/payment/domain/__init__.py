from .enum import PaymentIntentStatus as PaymentIntentStatus
from .gateway import PaymentGateway as PaymentGateway
from .value_object import PaymentIntent as PaymentIntent
from .value_object import PaymentIntentSnapshot as PaymentIntentSnapshot
