"""
Tests for room occupancy aggregation.
"""

from datetime import date

from models.occupancy import booked_rooms, build_occupancy


def _reservation(start, days, selections, status='pendiente'):
    return {
        'id': f'{start}-{days}',
        'user_id': 'u1',
        'reservation_date': start,
        'number_of_days': days,
        'room_selections': [{'type': t, 'quantity': q} for t, q in selections],
        'status': status,
    }


RESERVATIONS = [
    _reservation('2024-06-01', 3, [('habitacion_1_persona', 6)]),
    _reservation('2024-06-02', 2, [('habitacion_1_persona', 2), ('habitacion_2_personas', 4)]),
    _reservation('2024-06-10', 1, [('habitacion_3_personas', 5)], status='cancelado'),
]


class TestBookedRooms:
    """Tests for the per-night, per-category count."""

    def test_sums_overlapping_reservations(self):
        """Every reservation covering the night counts."""
        assert booked_rooms(RESERVATIONS, '2024-06-01', 'habitacion_1_persona') == 6
        assert booked_rooms(RESERVATIONS, '2024-06-02', 'habitacion_1_persona') == 8
        assert booked_rooms(RESERVATIONS, date(2024, 6, 3), 'habitacion_1_persona') == 8

    def test_checkout_day_is_free(self):
        """Rooms are released on the check-out day."""
        assert booked_rooms(RESERVATIONS, '2024-06-04', 'habitacion_1_persona') == 0

    def test_absent_category_counts_zero(self):
        """Categories not in a reservation add nothing."""
        assert booked_rooms(RESERVATIONS, '2024-06-01', 'habitacion_2_personas') == 0
        assert booked_rooms(RESERVATIONS, '2024-06-02', 'habitacion_5_personas') == 0

    def test_cancelled_counted_by_default(self):
        """Cancelled reservations still hold their rooms by default."""
        assert booked_rooms(RESERVATIONS, '2024-06-10', 'habitacion_3_personas') == 5

    def test_cancelled_excluded_when_disabled(self):
        """count_cancelled=False frees cancelled rooms."""
        assert booked_rooms(
            RESERVATIONS, '2024-06-10', 'habitacion_3_personas', count_cancelled=False
        ) == 0

    def test_empty(self):
        """No reservations, nothing booked."""
        assert booked_rooms([], '2024-06-01', 'habitacion_1_persona') == 0


class TestBuildOccupancy:
    """Tests for the occupancy table."""

    def test_table(self):
        """Table covers every night of every reservation."""
        table = build_occupancy(RESERVATIONS)

        assert table[date(2024, 6, 1)] == {'habitacion_1_persona': 6}
        assert table[date(2024, 6, 2)] == {
            'habitacion_1_persona': 8,
            'habitacion_2_personas': 4,
        }
        assert table[date(2024, 6, 10)] == {'habitacion_3_personas': 5}
        assert date(2024, 6, 4) not in table

    def test_table_matches_booked_rooms(self):
        """Table and single lookups agree."""
        table = build_occupancy(RESERVATIONS)
        for night, counts in table.items():
            for category, count in counts.items():
                assert booked_rooms(RESERVATIONS, night, category) == count

    def test_table_without_cancelled(self):
        """Cancelled reservations can be left out of the table."""
        table = build_occupancy(RESERVATIONS, count_cancelled=False)
        assert date(2024, 6, 10) not in table
