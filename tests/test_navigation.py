from ashmow.event_service import EventService
from ashmow.events import EventHandler, handles
from ashmow.geo_pos import GeoPos
from ashmow.navigation import EvNav, NavigationService


class _Recorder(EventHandler):
    def __init__(self):
        self.received = []

    @handles(EvNav)
    def on_nav(self, event):
        self.received.append(event)


def test_ev_nav_keeps_position():
    event = EvNav(GeoPos(15.0, 60.0))
    assert event.geo_pos == GeoPos(15.0, 60.0)
    assert event.geo_pos.lat == 15.0
    assert event.geo_pos.lng == 60.0


def test_ev_nav_instances_share_type_uuid():
    assert EvNav(GeoPos(1.0, 2.0)).uuid == EvNav(GeoPos()).uuid


def test_ev_nav_delivered_through_event_service():
    service = EventService()
    recorder = _Recorder()
    service.add_event_handler(recorder)
    service.dispatch(EvNav(GeoPos(3.0, 4.0)))
    service.update()
    assert [e.geo_pos for e in recorder.received] == [GeoPos(3.0, 4.0)]


def test_navigation_service_name():
    assert NavigationService(EventService()).name == "navigation_service"


def test_navigation_service_keeps_event_service():
    events = EventService()
    assert NavigationService(events).event_service is events


def test_navigation_update_sends_no_events():
    events = EventService()
    recorder = _Recorder()
    events.add_event_handler(recorder)
    nav = NavigationService(events)
    nav.update()
    events.update()
    assert recorder.received == []