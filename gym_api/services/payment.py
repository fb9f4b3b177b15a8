from gym_api.models.payment import Payment
from gym_api.services.base import CrudService


# 결제는 공통 CRUD 외 추가 조회가 없음
class PaymentService(CrudService[Payment]):
    model = Payment
