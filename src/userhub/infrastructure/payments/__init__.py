from userhub.infrastructure.payments.http_payment_gateway import HttpPaymentGateway

__all__ = ["HttpPaymentGateway"]
