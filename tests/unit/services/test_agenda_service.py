"""아젠다 서비스 단위 테스트

- create: 성공, 빈 내용, 권한
- list: scope 필터 (all / relevant / future / completed)
- update: 내용, 완료, 예정일 해제
- toggle / delete
"""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from app.core.exceptions import AccessDeniedError, NotFoundError, ValidationError
from app.models.team import TeamMember
from app.models.user import User
from app.schemas.agenda import AgendaScope, CreateAgendaItemRequest, UpdateAgendaItemRequest
from app.services.agenda_service import AgendaService


# ===== create_agenda_item =====


@pytest.mark.asyncio
async def test_create_agenda_item_success(db_session, test_user: User, test_member: TeamMember):
    """아젠다 생성 성공 (내용 앞뒤 공백 제거)"""
    service = AgendaService(db_session)

    result = await service.create_agenda_item(
        test_member.id,
        CreateAgendaItemRequest(content="  커리어 목표 논의  ", scheduledDate=date(2026, 3, 20)),
        test_user.id,
    )

    assert result.content == "커리어 목표 논의"
    assert result.completed is False
    assert result.scheduled_date == date(2026, 3, 20)
    assert result.team_member_id == test_member.id


@pytest.mark.asyncio
async def test_create_agenda_item_blank_content(
    db_session, test_user: User, test_member: TeamMember
):
    """공백만 있는 내용은 거부"""
    service = AgendaService(db_session)

    with pytest.raises(ValidationError, match="CONTENT_REQUIRED"):
        await service.create_agenda_item(
            test_member.id, CreateAgendaItemRequest(content="   "), test_user.id
        )


@pytest.mark.asyncio
async def test_create_agenda_item_not_owner(
    db_session, test_user2: User, test_member: TeamMember
):
    """다른 사용자의 팀원에게 아젠다 추가 불가"""
    service = AgendaService(db_session)

    with pytest.raises(AccessDeniedError, match="PERMISSION_DENIED"):
        await service.create_agenda_item(
            test_member.id, CreateAgendaItemRequest(content="침입"), test_user2.id
        )


# ===== list_agenda_items =====


@pytest.mark.asyncio
async def test_list_agenda_items_scopes(
    db_session, test_user: User, test_member: TeamMember, make_agenda_item, today: date
):
    """scope별 필터링 (최신순)"""
    a = await make_agenda_item("A")
    b = await make_agenda_item("B", scheduled_date=today - timedelta(days=1))
    c = await make_agenda_item("C", scheduled_date=today + timedelta(days=1))
    d = await make_agenda_item("D", scheduled_date=today, completed=True)
    service = AgendaService(db_session)

    all_items = await service.list_agenda_items(
        test_member.id, test_user.id, AgendaScope.ALL, today
    )
    relevant = await service.list_agenda_items(
        test_member.id, test_user.id, AgendaScope.RELEVANT, today
    )
    future = await service.list_agenda_items(
        test_member.id, test_user.id, AgendaScope.FUTURE, today
    )
    completed = await service.list_agenda_items(
        test_member.id, test_user.id, AgendaScope.COMPLETED, today
    )

    assert [i.id for i in all_items] == [d.id, c.id, b.id, a.id]
    assert [i.id for i in relevant] == [b.id, a.id]
    assert [i.id for i in future] == [c.id]
    assert [i.id for i in completed] == [d.id]


@pytest.mark.asyncio
async def test_list_agenda_items_member_not_found(db_session, test_user: User):
    """존재하지 않는 팀원"""
    service = AgendaService(db_session)

    with pytest.raises(NotFoundError, match="MEMBER_NOT_FOUND"):
        await service.list_agenda_items(uuid4(), test_user.id)


# ===== update_agenda_item =====


@pytest.mark.asyncio
async def test_update_agenda_item_content_and_completed(
    db_session, test_user: User, make_agenda_item
):
    """내용과 완료 여부 수정"""
    item = await make_agenda_item("이전 내용")
    service = AgendaService(db_session)

    result = await service.update_agenda_item(
        item.id,
        UpdateAgendaItemRequest(content="새 내용", completed=True),
        test_user.id,
    )

    assert result.content == "새 내용"
    assert result.completed is True


@pytest.mark.asyncio
async def test_update_agenda_item_clears_scheduled_date(
    db_session, test_user: User, make_agenda_item, today: date
):
    """scheduledDate를 null로 보내면 예정일 해제"""
    item = await make_agenda_item("A", scheduled_date=today)
    service = AgendaService(db_session)

    result = await service.update_agenda_item(
        item.id,
        UpdateAgendaItemRequest.model_validate({"scheduledDate": None}),
        test_user.id,
    )

    assert result.scheduled_date is None


@pytest.mark.asyncio
async def test_update_agenda_item_keeps_date_when_omitted(
    db_session, test_user: User, make_agenda_item, today: date
):
    """scheduledDate를 보내지 않으면 예정일 유지"""
    item = await make_agenda_item("A", scheduled_date=today)
    service = AgendaService(db_session)

    result = await service.update_agenda_item(
        item.id, UpdateAgendaItemRequest(content="B"), test_user.id
    )

    assert result.scheduled_date == today


@pytest.mark.asyncio
async def test_update_agenda_item_not_owner(db_session, test_user2: User, make_agenda_item):
    """다른 사용자의 아젠다 수정 불가"""
    item = await make_agenda_item("A")
    service = AgendaService(db_session)

    with pytest.raises(AccessDeniedError, match="PERMISSION_DENIED"):
        await service.update_agenda_item(
            item.id, UpdateAgendaItemRequest(completed=True), test_user2.id
        )


@pytest.mark.asyncio
async def test_update_agenda_item_not_found(db_session, test_user: User):
    """존재하지 않는 아젠다"""
    service = AgendaService(db_session)

    with pytest.raises(NotFoundError, match="AGENDA_ITEM_NOT_FOUND"):
        await service.update_agenda_item(
            uuid4(), UpdateAgendaItemRequest(completed=True), test_user.id
        )


# ===== toggle / delete =====


@pytest.mark.asyncio
async def test_toggle_agenda_item(db_session, test_user: User, make_agenda_item):
    """완료 토글은 두 번 하면 원래대로"""
    item = await make_agenda_item("A")
    service = AgendaService(db_session)

    first = await service.toggle_agenda_item(item.id, test_user.id)
    second = await service.toggle_agenda_item(item.id, test_user.id)

    assert first.completed is True
    assert second.completed is False


@pytest.mark.asyncio
async def test_delete_agenda_item(db_session, test_user: User, test_member: TeamMember, make_agenda_item):
    """삭제 후 목록에서 제외, 재삭제는 NotFoundError"""
    item = await make_agenda_item("A")
    service = AgendaService(db_session)

    await service.delete_agenda_item(item.id, test_user.id)

    assert await service.list_agenda_items(test_member.id, test_user.id) == []
    with pytest.raises(NotFoundError, match="AGENDA_ITEM_NOT_FOUND"):
        await service.delete_agenda_item(item.id, test_user.id)
