from service_center.core.constants import UNASSIGNED_MASTER_LABEL
from service_center.seed.demo import DEMO_MASTERS
from service_center.users.memory_repository import InMemoryMasterRepository
from service_center.users.service import MasterService


def test_list_masters_is_static_roster():
    svc = MasterService(InMemoryMasterRepository(DEMO_MASTERS))

    assert [m.master_id for m in svc.list_masters()] == ["1", "2", "3", "4"]


def test_master_name_falls_back_to_unassigned():
    svc = MasterService(InMemoryMasterRepository(DEMO_MASTERS))

    assert svc.master_name("3") == "Алексей Смирнов"
    assert svc.master_name(None) == UNASSIGNED_MASTER_LABEL
    assert svc.master_name("") == UNASSIGNED_MASTER_LABEL
    assert svc.master_name("99") == UNASSIGNED_MASTER_LABEL
