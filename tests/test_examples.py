"""
Tests for the example domains
"""

import pytest

from bedazzle.examples import car, cart, shape


class TestShape:
    """Decorated rectangle"""

    def test_area_and_perimeter(self):
        rect = shape.build_rect(10, 5)
        assert rect.get_area() == 50
        assert rect.get_perimeter() == 30

    def test_main_prints_results(self, capsys):
        assert shape.main() == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "50"
        assert out[1] == "30"
        assert '"width": 10' in "\n".join(out[2:])


class TestCart:
    """Shopping cart checkout"""

    def test_checkout_scenario(self):
        final = cart.checkout_demo()
        assert final.subtotal == 50
        assert final.discounts == pytest.approx(5)
        assert final.tax == pytest.approx(3.6)
        assert final.shipping == 5
        assert final.total == pytest.approx(53.6)
        assert [item["name"] for item in final.items] == ["Shirt", "Hat"]

    def test_add_item_keeps_previous_cart(self):
        empty = cart.build_cart()
        one = empty.add_item({"name": "Shirt", "price": 30})
        assert empty.items == []
        assert empty.total == 0
        assert one.subtotal == 30
        assert one.total == 30
        assert cart.INITIAL_CART["items"] == []

    def test_total_tracks_every_step(self):
        step = cart.build_cart().add_item({"price": 100}).apply_discount(25)
        assert step.total == pytest.approx(75)
        assert step.set_shipping(10).total == pytest.approx(85)

    def test_missing_price_raises(self):
        with pytest.raises(KeyError):
            cart.build_cart().add_item({"name": "Free sample"})

    def test_main_prints_totals(self, capsys):
        assert cart.main() == 0
        out = capsys.readouterr().out
        assert "Items:     Shirt, Hat" in out
        assert "Subtotal:  50" in out
        assert "Discounts: 5" in out
        assert "Tax:       3.6" in out
        assert "Shipping:  5" in out
        assert "Total:     53.6" in out


class TestCar:
    """F1 car setup simulator"""

    def test_initial_setup(self):
        race_car = car.build_car()
        assert race_car.name == "Base Car + High Downforce + Race Engine"
        assert race_car.upgrades == ["Soft Tires", "High Downforce", "Race Engine"]
        assert race_car.top_speed == 305
        assert race_car.acceleration == pytest.approx(7.2)
        assert race_car.cornering == 11
        assert race_car.tire_wear == 7
        assert race_car.fuel_usage == 8

    def test_turbo_upgrade_reapplies_setup(self):
        race_car = car.build_car().upgrade_turbo(2)
        assert race_car.name == "Base Car + High Downforce + Race Engine"
        assert race_car.upgrades == [
            "Soft Tires", "High Downforce", "Race Engine", "Turbo Lv2",
        ]
        assert race_car.top_speed == 320
        assert race_car.acceleration == pytest.approx(6.0)
        assert race_car.cornering == 16
        assert race_car.tire_wear == 9
        assert race_car.fuel_usage == pytest.approx(12)

    def test_pit_stops(self):
        race_car = car.build_car().upgrade_turbo(2)
        assert race_car.plan_pit_stops(50) == {
            "laps": 50,
            "tire_stops": 5,
            "fuel_stops": 7,
            "total_stops": 7,
        }
        assert race_car.plan_pit_stops()["laps"] == 50

    def test_lap_time(self):
        race_car = car.build_car().upgrade_turbo(2)
        assert race_car.estimate_lap_time({"length": 5.8, "turns": 18}) == pytest.approx(319.6)

    def test_base_car_untouched(self):
        car.build_car().upgrade_turbo(1)
        assert car.BASE_CAR["upgrades"] == []
        assert car.BASE_CAR["name"] == "Base Car"

    def test_summary(self, capsys):
        car.build_car().summary()
        out = capsys.readouterr().out
        assert "Base Car + High Downforce + Race Engine" in out
        assert "Upgrades:       Soft Tires, High Downforce, Race Engine" in out
        assert "Top Speed:      305 km/h" in out
        assert "0-100 in 7.2s" in out

    def test_main(self, capsys):
        assert car.main(turbo_level=2, laps=50) == 0
        out = capsys.readouterr().out
        assert "Turbo Lv2" in out
        assert "Pit strategy: 50 laps, 5 tire stop(s), 7 fuel stop(s), 7 total" in out
        assert "Estimated lap time: 319.6 s" in out
