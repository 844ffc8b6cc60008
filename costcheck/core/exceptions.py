class CostRecordException(Exception):
    """비용 레코드를 생성할 수 없음"""
    pass


class UnsupportedLocaleException(Exception):
    """지원하지 않는 숫자 포맷 로케일"""
    pass
