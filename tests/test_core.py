from __future__ import annotations

from datetime import datetime, timezone

import pyguild


def test_snowflakes():
    assert pyguild.snowflake_timestamp('175928847299117063') == 1462015105.796
    assert pyguild.snowflake_time('175928847299117063') == datetime(
        2016, 4, 30, 11, 18, 25, 796000, tzinfo=timezone.utc
    )
    assert pyguild.snowflake_timestamp('0') == pyguild.DISCORD_EPOCH / 1000

    assert pyguild.is_snowflake('175928847299117063')
    assert not pyguild.is_snowflake('')
    assert not pyguild.is_snowflake('12a')
    assert not pyguild.is_snowflake(175928847299117063)
    assert not pyguild.is_snowflake('١٢٣')


def test_resolve_id(guild: pyguild.Guild):
    assert pyguild.resolve_id('100') == '100'
    assert pyguild.resolve_id(guild) == '100'
    assert guild.created_at == pyguild.snowflake_time('100')
