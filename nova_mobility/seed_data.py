"""Sample data set loaded by ``nova_mobility.seed``.

Rows are listed in insertion order; foreign keys refer to the 1-based
position of the parent row. ``USERS`` carries plain sample passwords that
the loader hashes, and ``ROUTES`` carries planned start/end offsets in hours
from load time.
"""

CITIES_COLUMNS = ("name", "country_code", "timezone_iana")
CITIES = [
    ('New York',       'US', 'America/New_York'),
    ('Los Angeles',    'US', 'America/Los_Angeles'),
    ('Chicago',        'US', 'America/Chicago'),
    ('Houston',        'US', 'America/Chicago'),
    ('Miami',          'US', 'America/New_York'),

    ('Toronto',        'CA', 'America/Toronto'),
    ('Vancouver',      'CA', 'America/Vancouver'),
    ('Montreal',       'CA', 'America/Toronto'),
    ('Ottawa',         'CA', 'America/Toronto'),
    ('Calgary',        'CA', 'America/Edmonton'),

    ('London',         'GB', 'Europe/London'),
    ('Manchester',     'GB', 'Europe/London'),
    ('Birmingham',     'GB', 'Europe/London'),
    ('Liverpool',      'GB', 'Europe/London'),
    ('Leeds',          'GB', 'Europe/London'),

    ('Paris',          'FR', 'Europe/Paris'),
    ('Lyon',           'FR', 'Europe/Paris'),
    ('Marseille',      'FR', 'Europe/Paris'),
    ('Toulouse',       'FR', 'Europe/Paris'),
    ('Nice',           'FR', 'Europe/Paris'),

    ('Berlin',         'DE', 'Europe/Berlin'),
    ('Munich',         'DE', 'Europe/Berlin'),
    ('Hamburg',        'DE', 'Europe/Berlin'),
    ('Cologne',        'DE', 'Europe/Berlin'),
    ('Frankfurt',      'DE', 'Europe/Berlin'),

    ('Helsinki',       'FI', 'Europe/Helsinki'),
    ('Tampere',        'FI', 'Europe/Helsinki'),
    ('Turku',          'FI', 'Europe/Helsinki'),
    ('Vaasa',          'FI', 'Europe/Helsinki'),
    ('Oulu',           'FI', 'Europe/Helsinki'),
]


ZONES_COLUMNS = ("city_id", "code", "name", "polygon_wkt", "is_restricted")
ZONES = [
    (1,  'NYC-DT',   'New York Downtown',      'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (1,  'NYC-MD',   'New York Midtown',       'POLYGON((1 1,1 2,2 2,2 1,1 1))', 0),

    (2,  'LA-CEN',   'Los Angeles Central',    'POLYGON((0 0,0 2,2 2,2 0,0 0))', 0),
    (2,  'LA-BEV',   'Beverly Hills Zone',     'POLYGON((2 2,2 3,3 3,3 2,2 2))', 0),

    (3,  'CHI-LP',   'Chicago Lincoln Park',   'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (3,  'CHI-DT',   'Chicago Downtown',       'POLYGON((1 0,1 1,2 1,2 0,1 0))', 0),

    (4,  'HOU-MD',   'Houston Medical District', 'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (4,  'HOU-EN',   'Houston Eastside',       'POLYGON((1 1,1 2,2 2,2 1,1 1))', 0),

    (5,  'MIA-BCH',  'Miami Beach',            'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (5,  'MIA-DT',   'Miami Downtown',         'POLYGON((1 0,1 1,2 1,2 0,1 0))', 0),

    (6,  'TOR-DT',   'Toronto Downtown',       'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (6,  'TOR-NR',   'Toronto North York',     'POLYGON((1 1,1 2,2 2,2 1,1 1))', 0),

    (7,  'VAN-CEN',  'Vancouver Central',      'POLYGON((0 0,0 2,2 2,2 0,0 0))', 0),
    (7,  'VAN-RMD',  'Vancouver Richmond',     'POLYGON((2 2,2 3,3 3,3 2,2 2))', 0),

    (8,  'MTL-OLD',  'Montreal Old Port',      'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (8,  'MTL-DT',   'Montreal Downtown',      'POLYGON((1 0,1 1,2 1,2 0,1 0))', 0),

    (9,  'OTT-CEN',  'Ottawa Centre',          'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (9,  'OTT-KAN',  'Ottawa Kanata',          'POLYGON((1 1,1 2,2 2,2 1,1 1))', 0),

    (10, 'CAL-DT',   'Calgary Downtown',       'POLYGON((0 0,0 1,1 1,1 0,0 0))', 0),
    (10, 'CAL-NE',   'Calgary Northeast',      'POLYGON((1 0,1 1,2 1,2 0,1 0))', 0),

    (11, 'LDN-CEN',  'London Central',         'POLYGON((0 0,0 2,2 2,2 0,0 0))', 0),
    (11, 'LDN-WST',  'London West End',        'POLYGON((2 2,2 3,3 3,3 2,2 2))', 0),
]


ADDRESSES_COLUMNS = ("city_id", "line1", "line2", "postal_code", "latitude", "longitude", "place_label")
ADDRESSES = [
    (1,  '350 5th Ave',       'Floor 50', '10118', 40.748817, -73.985428, 'Empire State Building'),
    (2,  '6801 Hollywood Blvd', None, '90028', 34.101558, -118.339493, 'Hollywood Walk of Fame'),
    (3,  '233 S Wacker Dr',   None, '60606', 41.878876, -87.635915, 'Willis Tower'),
    (4,  '1500 McKinney St',  None, '77010', 29.752300, -95.357300, 'Discovery Green Park'),
    (5,  '401 Biscayne Blvd', None, '33132', 25.777300, -80.186700, 'Bayside Marketplace'),

    (6,  '290 Bremner Blvd',  None, 'M5V 3L9', 43.642566, -79.387057, 'CN Tower'),
    (7,  '650 W 41st Ave',    None, 'V5Z 2M9', 49.232400, -123.118800, 'Queen Elizabeth Park'),
    (8,  '1000 Rue De La Gauchetière', None, 'H3B 4W5', 45.496000, -73.570000, 'Montreal Central Station'),
    (9,  '111 Wellington St', None, 'K1A 0A6', 45.423600, -75.700900, 'Parliament Hill'),
    (10, '1410 Olympic Way SE', None, 'T2G 2W1', 51.037400, -114.054300, 'Scotiabank Saddledome'),

    (11, 'Westminster Abbey', None, 'SW1P 3PA', 51.499300, -0.127300, 'Abbey'),
    (12, 'Old Trafford Stadium', None, 'M16 0RA', 53.463100, -2.291300, 'Football Ground'),
    (13, 'Broad St',          None, 'B1 2EA', 52.478600, -1.908900, 'ICC Birmingham'),
    (14, 'Lime St',           None, 'L1 1JD', 53.407600, -2.977900, 'Liverpool Lime Street Station'),
    (15, 'Millennium Square', None, 'LS2 3AD', 53.802000, -1.548600, 'City Centre'),

    (16, '5 Avenue Anatole',  None, '75007', 48.858400, 2.294500, 'Eiffel Tower'),
    (17, 'Place Bellecour',   None, '69002', 45.757800, 4.832000, 'Bellecour Square'),
    (18, 'La Canebière',      None, '13001', 43.296500, 5.369800, 'Old Port'),
    (19, 'Capitole de Toulouse', None, '31000', 43.604700, 1.444200, 'City Hall'),
    (20, 'Promenade des Anglais', None, '06000', 43.695000, 7.265000, 'Beachfront'),

    (21, 'Brandenburg Gate',  None, '10117', 52.516300, 13.377700, 'Gate'),
    (22, 'Marienplatz',       None, '80331', 48.137100, 11.575400, 'Central Square'),
    (23, 'Speicherstadt',     None, '20457', 53.543000, 9.988000, 'Warehouse District'),
    (24, 'Cologne Cathedral', None, '50667', 50.941300, 6.958300, 'Dom'),
    (25, 'Römerberg',         None, '60311', 50.110600, 8.682100, 'Historic Centre'),

    (26, 'Mannerheimintie 13', None, '00100', 60.169900, 24.938400, 'Central Helsinki'),
    (27, 'Hämeenkatu 20',     None, '33200', 61.497800, 23.761000, 'Tampere Main Street'),
    (28, 'Eerikinkatu 15',    None, '20100', 60.451800, 22.266600, 'Turku Centre'),
    (29, 'Vaasanpuistikko 2', None, '65100', 63.095100, 21.615800, 'Vaasa Market Square'),
    (30, 'Torikatu 10',       None, '90100', 65.012100, 25.465100, 'Oulu Centre'),
]


ORGANIZATIONS_COLUMNS = ("name", "type")
ORGANIZATIONS = [
    ('Urban Fresh Foods',         'Merchant'),
    ('CityRide Mobility',          'Merchant'),
    ('SkyDrop Deliveries',         'Merchant'),
    ('GreenWheel Scooters',        'Merchant'),
    ('Cafe Bonjour',               'Merchant'),

    ('TechNova Partners',          'Partner'),
    ('Global Logistics Alliance',  'Partner'),
    ('Finland Trade Council',      'Partner'),
    ('EuroRetail Network',         'Partner'),
    ('CloudSys Integrations',      'Partner'),

    ('Internal Finance Dept',      'Internal'),
    ('Internal IT Support',        'Internal'),
    ('Internal HR Division',       'Internal'),
    ('Internal Operations Hub',    'Internal'),
    ('Internal Compliance Unit',   'Internal'),

    ('FreshMart Supermarkets',     'Merchant'),
    ('GoClean Energy',             'Merchant'),
    ('Metro Electronics',          'Merchant'),
    ('VeloCity Bikes',             'Merchant'),
    ('HappyPets Store',            'Merchant'),

    ('LogiLink Partners',          'Partner'),
    ('DigitalPay Systems',         'Partner'),
    ('SmartFleet Associates',      'Partner'),
    ('Global Courier Group',       'Partner'),
    ('MegaCloud Hosting',          'Partner'),

    ('Internal Security Team',     'Internal'),
    ('Internal R&D Unit',          'Internal'),
    ('Internal Training Center',   'Internal'),
    ('Internal Analytics Cell',    'Internal'),
    ('Internal Project Office',    'Internal'),
]


PERSONS_COLUMNS = ("first_name", "last_name", "email", "phone")
PERSONS = [
    ('John',     'Smith',      'john.smith@example.com',      '+1-202-555-0101'),
    ('Emma',     'Johnson',    'emma.johnson@example.com',    '+1-202-555-0102'),
    ('Oliver',   'Williams',   'oliver.williams@example.com', '+1-202-555-0103'),
    ('Sophia',   'Brown',      'sophia.brown@example.com',    '+1-202-555-0104'),
    ('Liam',     'Jones',      'liam.jones@example.com',      '+1-202-555-0105'),

    ('Ava',      'Miller',     'ava.miller@example.com',      '+1-202-555-0106'),
    ('Noah',     'Davis',      'noah.davis@example.com',      '+1-202-555-0107'),
    ('Isabella', 'Garcia',     'isabella.garcia@example.com', '+1-202-555-0108'),
    ('Ethan',    'Martinez',   'ethan.martinez@example.com',  '+1-202-555-0109'),
    ('Mia',      'Rodriguez',  'mia.rodriguez@example.com',   '+1-202-555-0110'),

    ('Lucas',    'Hernandez',  'lucas.hernandez@example.com', '+1-202-555-0111'),
    ('Amelia',   'Lopez',      'amelia.lopez@example.com',    '+1-202-555-0112'),
    ('Mason',    'Gonzalez',   'mason.gonzalez@example.com',  '+1-202-555-0113'),
    ('Harper',   'Wilson',     'harper.wilson@example.com',   '+1-202-555-0114'),
    ('James',    'Anderson',   'james.anderson@example.com',  '+1-202-555-0115'),

    ('Evelyn',   'Thomas',     'evelyn.thomas@example.com',   '+1-202-555-0116'),
    ('Benjamin', 'Taylor',     'benjamin.taylor@example.com', '+1-202-555-0117'),
    ('Charlotte','Moore',      'charlotte.moore@example.com', '+1-202-555-0118'),
    ('Henry',    'Jackson',    'henry.jackson@example.com',   '+1-202-555-0119'),
    ('Abigail',  'Martin',     'abigail.martin@example.com',  '+1-202-555-0120'),

    ('Alexander','Lee',        'alexander.lee@example.com',   '+1-202-555-0121'),
    ('Emily',    'Perez',      'emily.perez@example.com',     '+1-202-555-0122'),
    ('William',  'White',      'william.white@example.com',   '+1-202-555-0123'),
    ('Grace',    'Harris',     'grace.harris@example.com',    '+1-202-555-0124'),
    ('Daniel',   'Clark',      'daniel.clark@example.com',    '+1-202-555-0125'),

    ('Victoria', 'Lewis',      'victoria.lewis@example.com',  '+1-202-555-0126'),
    ('Sebastian','Walker',     'sebastian.walker@example.com','+1-202-555-0127'),
    ('Chloe',    'Young',      'chloe.young@example.com',     '+1-202-555-0128'),
    ('Jack',     'Allen',      'jack.allen@example.com',      '+1-202-555-0129'),
    ('Lily',     'King',       'lily.king@example.com',       '+1-202-555-0130'),
]


USERS_COLUMNS = ("person_id", "username", "password_hash")
USERS = [
    (1,  'johnsmith',      'Pass@101'),
    (2,  'emmajohnson',    'Pass@102'),
    (3,  'oliverw',        'Pass@103'),
    (4,  'sophiab',        'Pass@104'),
    (5,  'liamjones',      'Pass@105'),

    (6,  'avamiller',      'Pass@106'),
    (7,  'noahdavis',      'Pass@107'),
    (8,  'isagarcia',      'Pass@108'),
    (9,  'ethanmartinez',  'Pass@109'),
    (10, 'miarodriguez',   'Pass@110'),

    (11, 'lucash',         'Pass@111'),
    (12, 'amelialopez',    'Pass@112'),
    (13, 'masong',         'Pass@113'),
    (14, 'harperwilson',   'Pass@114'),
    (15, 'janderson',      'Pass@115'),

    (16, 'evelynthomas',   'Pass@116'),
    (17, 'bentaylor',      'Pass@117'),
    (18, 'charlmoore',     'Pass@118'),
    (19, 'henryjackson',   'Pass@119'),
    (20, 'abimartin',      'Pass@120'),

    (21, 'alexlee',        'Pass@121'),
    (22, 'emilyperez',     'Pass@122'),
    (23, 'willwhite',      'Pass@123'),
    (24, 'graceharris',    'Pass@124'),
    (25, 'danclark',       'Pass@125'),

    (26, 'vlewis',         'Pass@126'),
    (27, 'sebwalker',      'Pass@127'),
    (28, 'chloeyoung',     'Pass@128'),
    (29, 'jackallen',      'Pass@129'),
    (30, 'lilyking',       'Pass@130'),
]


ROLES_COLUMNS = ("name",)
ROLES = [
    ('Admin',),
    ('SuperUser',),
    ('MerchantManager',),
    ('PartnerManager',),
    ('InternalStaff',),
    ('Customer',),
    ('DeliveryCourier',),
    ('SupportAgent',),
    ('Analyst',),
    ('Auditor',),
]


USER_ROLES_COLUMNS = ("user_id", "role_id")
USER_ROLES = [
    (1, 1), (1, 6), (1, 7),
    (2, 2), (2, 6), (2, 8),
    (3, 3), (3, 6), (3, 9),
    (4, 4), (4, 6), (4, 7),
    (5, 5), (5, 6), (5, 10),
    (6, 1), (6, 6), (6, 8),
    (7, 2), (7, 6), (7, 7),
    (8, 3), (8, 6), (8, 9),
    (9, 4), (9, 6), (9, 10),
    (10, 5), (10, 6), (10, 7),
    (11, 1), (11, 6), (11, 9),
    (12, 2), (12, 6), (12, 7),
    (13, 3), (13, 6), (13, 8),
    (14, 4), (14, 6), (14, 9),
    (15, 5), (15, 6), (15, 10),
    (16, 1), (16, 6), (16, 7),
    (17, 2), (17, 6), (17, 8),
    (18, 3), (18, 6), (18, 9),
    (19, 4), (19, 6), (19, 7),
    (20, 5), (20, 6), (20, 10),
    (21, 1), (21, 6), (21, 9),
    (22, 2), (22, 6), (22, 7),
    (23, 3), (23, 6), (23, 8),
    (24, 4), (24, 6), (24, 9),
    (25, 5), (25, 6), (25, 10),
    (26, 1), (26, 6), (26, 7),
    (27, 2), (27, 6), (27, 8),
    (28, 3), (28, 6), (28, 9),
    (29, 4), (29, 6), (29, 7),
    (30, 5), (30, 6), (30, 10),
]


HUBS_COLUMNS = ("city_id", "name", "address_id")
HUBS = [
    (1,  'New York Central Hub',      1),
    (2,  'Los Angeles West Hub',      2),
    (3,  'Chicago Downtown Hub',      3),
    (4,  'Houston Energy Corridor',   4),
    (5,  'Miami Beach Hub',           5),

    (6,  'Toronto Main Hub',          6),
    (7,  'Vancouver Pacific Hub',     7),
    (8,  'Montreal East Hub',         8),
    (9,  'Ottawa Capital Hub',        9),
    (10, 'Calgary Central Hub',      10),
]


DRONE_MODELS_COLUMNS = ("name", "max_payload_kg", "range_km")
DRONE_MODELS = [
    ('SkyCarrier X1',       5.00, 15.00),
    ('SkyCarrier X2',       6.50, 18.00),
    ('SkyCarrier X3',       7.20, 20.00),
    ('SkyCarrier X4',       8.00, 22.00),
    ('SkyCarrier X5',       9.50, 25.00),

    ('AirDropper A1',       2.50, 10.00),
    ('AirDropper A2',       3.00, 12.00),
    ('AirDropper A3',       3.50, 14.00),
    ('AirDropper A4',       4.00, 16.00),
    ('AirDropper A5',       4.50, 18.00),

    ('FalconPro 100',       12.00, 30.00),
    ('FalconPro 200',       14.00, 35.00),
    ('FalconPro 300',       16.00, 40.00),
    ('FalconPro 400',       18.00, 45.00),
    ('FalconPro 500',       20.00, 50.00),

    ('DeliveryHawk D1',     8.00, 28.00),
    ('DeliveryHawk D2',     9.00, 30.00),
    ('DeliveryHawk D3',     10.00, 32.00),
    ('DeliveryHawk D4',     11.00, 34.00),
    ('DeliveryHawk D5',     12.00, 36.00),

    ('UrbanFlyer U1',       5.00, 20.00),
    ('UrbanFlyer U2',       6.00, 22.00),
    ('UrbanFlyer U3',       7.00, 24.00),
    ('UrbanFlyer U4',       8.00, 26.00),
    ('UrbanFlyer U5',       9.00, 28.00),

    ('MegaLift M1',         15.00, 20.00),
    ('MegaLift M2',         18.00, 22.00),
    ('MegaLift M3',         20.00, 25.00),
    ('MegaLift M4',         22.00, 28.00),
    ('MegaLift M5',         25.00, 30.00),
]


SCOOTER_MODELS_COLUMNS = ("name", "range_km")
SCOOTER_MODELS = [
    ('CityScoot S1',    20.00),
    ('CityScoot S2',    25.00),
    ('CityScoot S3',    30.00),
    ('CityScoot S4',    35.00),
    ('CityScoot S5',    40.00),

    ('UrbanRider U1',   22.00),
    ('UrbanRider U2',   28.00),
    ('UrbanRider U3',   34.00),
    ('UrbanRider U4',   38.00),
    ('UrbanRider U5',   42.00),

    ('MetroMove M1',    26.00),
    ('MetroMove M2',    32.00),
    ('MetroMove M3',    36.00),
    ('MetroMove M4',    45.00),
    ('MetroMove M5',    50.00),

    ('EcoWheel E1',     24.00),
    ('EcoWheel E2',     29.00),
    ('EcoWheel E3',     37.00),
    ('EcoWheel E4',     44.00),
    ('EcoWheel E5',     48.00),

    ('SwiftRide SR1',   30.00),
    ('SwiftRide SR2',   35.00),
    ('SwiftRide SR3',   41.00),
    ('SwiftRide SR4',   47.00),
    ('SwiftRide SR5',   55.00),

    ('GlideX G1',       33.00),
    ('GlideX G2',       39.00),
    ('GlideX G3',       46.00),
    ('GlideX G4',       60.00),
    ('GlideX G5',       75.00),
]


VEHICLES_COLUMNS = ("hub_id", "type", "drone_model_id", "scooter_model_id", "serial_number", "status")
VEHICLES = [
    (1,  'Drone',   1,  None, 'DRONE-001-AX', 'Active'),
    (1,  'Drone',   2,  None, 'DRONE-002-BY', 'Maintenance'),
    (2,  'Drone',   3,  None, 'DRONE-003-CZ', 'Active'),
    (2,  'Drone',   4,  None, 'DRONE-004-DX', 'Active'),
    (3,  'Drone',   5,  None, 'DRONE-005-EY', 'Retired'),
    (3,  'Drone',   6,  None, 'DRONE-006-FZ', 'Active'),
    (4,  'Drone',   7,  None, 'DRONE-007-GX', 'Active'),
    (4,  'Drone',   8,  None, 'DRONE-008-HY', 'Maintenance'),
    (5,  'Drone',   9,  None, 'DRONE-009-IZ', 'Active'),
    (5,  'Drone',   10, None, 'DRONE-010-JX', 'Active'),
    (6,  'Drone',   11, None, 'DRONE-011-KY', 'Active'),
    (6,  'Drone',   12, None, 'DRONE-012-LZ', 'Maintenance'),
    (7,  'Drone',   13, None, 'DRONE-013-MX', 'Active'),
    (7,  'Drone',   14, None, 'DRONE-014-NY', 'Active'),
    (8,  'Drone',   15, None, 'DRONE-015-OZ', 'Retired'),
    (8,  'Scooter', None, 1,  'SCOOT-016-A1', 'Active'),
    (9,  'Scooter', None, 2,  'SCOOT-017-B2', 'Active'),
    (9,  'Scooter', None, 3,  'SCOOT-018-C3', 'Maintenance'),
    (10, 'Scooter', None, 4,  'SCOOT-019-D4', 'Active'),
    (10, 'Scooter', None, 5,  'SCOOT-020-E5', 'Retired'),
    (1,  'Scooter', None, 6,  'SCOOT-021-F6', 'Active'),
    (2,  'Scooter', None, 7,  'SCOOT-022-G7', 'Active'),
    (3,  'Scooter', None, 8,  'SCOOT-023-H8', 'Maintenance'),
    (4,  'Scooter', None, 9,  'SCOOT-024-I9', 'Active'),
    (5,  'Scooter', None, 10, 'SCOOT-025-J0', 'Active'),
    (6,  'Scooter', None, 11, 'SCOOT-026-K1', 'Active'),
    (7,  'Scooter', None, 12, 'SCOOT-027-L2', 'Active'),
    (8,  'Scooter', None, 13, 'SCOOT-028-M3', 'Retired'),
    (9,  'Scooter', None, 14, 'SCOOT-029-N4', 'Active'),
    (10, 'Scooter', None, 15, 'SCOOT-030-O5', 'Maintenance'),
]


VEHICLE_BATTERIES_COLUMNS = ("vehicle_id", "serial_number", "health_pct", "cycle_count")
VEHICLE_BATTERIES = [
    (1,  'BAT-001-A1', 95,  12),
    (2,  'BAT-002-B2', 88,  20),
    (3,  'BAT-003-C3', 92,  15),
    (4,  'BAT-004-D4', 97,   8),
    (5,  'BAT-005-E5', 85,  25),
    (6,  'BAT-006-F6', 90,  18),
    (7,  'BAT-007-G7', 93,  10),
    (8,  'BAT-008-H8', 80,  30),
    (9,  'BAT-009-I9', 96,   7),
    (10, 'BAT-010-J0', 89,  22),
    (11, 'BAT-011-K1', 94,  14),
    (12, 'BAT-012-L2', 91,  16),
    (13, 'BAT-013-M3', 87,  24),
    (14, 'BAT-014-N4', 98,   5),
    (15, 'BAT-015-O5', 82,  28),
    (16, 'BAT-016-P6', 95,  12),
    (17, 'BAT-017-Q7', 90,  18),
    (18, 'BAT-018-R8', 92,  15),
    (19, 'BAT-019-S9', 85,  26),
    (20, 'BAT-020-T0', 97,   9),
    (21, 'BAT-021-U1', 94,  13),
    (22, 'BAT-022-V2', 89,  21),
    (23, 'BAT-023-W3', 91,  17),
    (24, 'BAT-024-X4', 96,   6),
    (25, 'BAT-025-Y5', 83,  27),

    (26, 'BAT-026-Z6', 95,  12),
    (27, 'BAT-027-A7', 88,  20),
    (28, 'BAT-028-B8', 92,  14),
    (29, 'BAT-029-C9', 97,   8),
    (30, 'BAT-030-D0', 86,  23),
]


MAINTENANCE_ORDERS_COLUMNS = ("vehicle_id", "opened_by_user_id", "status", "priority", "notes")
MAINTENANCE_ORDERS = [
    (1,  1,  'Open',        'High',     'Battery health dropped below 85%'),
    (2,  2,  'InProgress',  'Medium',   'Firmware update in progress'),
    (3,  3,  'Closed',      'Low',      'Routine inspection completed'),
    (4,  4,  'Open',        'Critical', 'Motor malfunction detected'),
    (5,  5,  'Closed',      'Medium',   'Brake adjustment done'),
    (6,  6,  'InProgress',  'High',     'GPS calibration ongoing'),
    (7,  7,  'Open',        'Low',      'Cosmetic scratches reported'),
    (8,  8,  'Closed',      'Medium',   'Software patch applied'),
    (9,  9,  'InProgress',  'High',     'Battery replacement ongoing'),
    (10, 10, 'Open',        'Critical', 'Signal loss issue'),
    (11, 1,  'Closed',      'Low',      'Annual inspection completed'),
    (12, 2,  'InProgress',  'Medium',   'Wheel alignment being fixed'),
    (13, 3,  'Open',        'High',     'Unexpected shutdown issue'),
    (14, 4,  'Closed',      'Medium',   'Lighting system fixed'),
    (15, 5,  'Open',        'Critical', 'Collision damage assessment'),
    (16, 6,  'InProgress',  'High',     'Battery overheating issue'),
    (17, 7,  'Closed',      'Low',      'Tire replacement done'),
    (18, 8,  'Open',        'Medium',   'Loose handlebar reported'),
    (19, 9,  'InProgress',  'Critical', 'Engine noise investigation'),
    (20, 10, 'Closed',      'High',     'Gyroscope recalibrated'),
    (21, 1,  'Open',        'Low',      'General cleaning scheduled'),
    (22, 2,  'InProgress',  'Medium',   'Sensor recalibration ongoing'),
    (23, 3,  'Closed',      'High',     'Brake pads replaced'),
    (24, 4,  'Open',        'Critical', 'Main controller issue'),
    (25, 5,  'InProgress',  'Medium',   'Firmware rollout in progress'),
    (26, 6,  'Closed',      'Low',      'Inspection cleared'),
    (27, 7,  'Open',        'High',     'Charging port damaged'),
    (28, 8,  'InProgress',  'Medium',   'Software diagnostics running'),
    (29, 9,  'Closed',      'Critical', 'Battery pack replaced'),
    (30, 10, 'Open',        'High',     'Motor overheating warning'),
]


MAINTENANCE_LOGS_COLUMNS = ("maintenance_order_id", "logged_by_user_id", "entry")
MAINTENANCE_LOGS = [
    (1,  2,  'Initial diagnostics queued; battery health trend captured.'),
    (2,  3,  'Firmware package downloaded; device in update mode.'),
    (3,  4,  'QC sign-off obtained; no anomalies found.'),
    (4,  5,  'Motor controller error codes collected; parts on order.'),
    (5,  6,  'Brake tension adjusted; test ride passed.'),
    (6,  7,  'GPS lock improved after calibration; monitoring drift.'),
    (7,  8,  'Cosmetic assessment recorded; no safety impact.'),
    (8,  9,  'Patch v2.1 applied; reboot successful.'),
    (9,  10, 'Battery swap in progress; thermal checks pending.'),
    (10, 1,  'RF antenna reseated; signal quality re-tested.'),

    (11, 2,  'Annual checklist completed; records archived.'),
    (12, 3,  'Wheel alignment corrected; vibration reduced.'),
    (13, 4,  'Crash logs exported; root cause under analysis.'),
    (14, 5,  'LED module replaced; draw within spec.'),
    (15, 6,  'Photo evidence captured; frame inspection scheduled.'),

    (16, 7,  'Thermal paste reapplied; fan curve updated.'),
    (17, 8,  'Tires replaced; pressure set to recommended PSI.'),
    (18, 9,  'Handlebar bolts retorqued; rattle resolved.'),
    (19, 10, 'Engine acoustic profile recorded; bearing suspected.'),
    (20, 1,  'IMU recalibrated; drift minimized.'),

    (21, 2,  'Deep clean performed; corrosion check done.'),
    (22, 3,  'Sensor offsets recalculated; tolerance within range.'),
    (23, 4,  'Brake pads fitted; stopping distance verified.'),
    (24, 5,  'Controller reset attempted; escalation to L2.'),
    (25, 6,  'Firmware staged; rollback plan documented.'),

    (26, 7,  'Inspection cleared; no action needed.'),
    (27, 8,  'Charging port pins bent; replacement requested.'),
    (28, 9,  'Diagnostics completed; logs attached to ticket.'),
    (29, 10, 'New battery pack validated; capacity test passed.'),
    (30, 1,  'Motor temp spike reproduced; airflow path reviewed.'),
]


MERCHANTS_COLUMNS = ("organization_id", "default_city_id")
MERCHANTS = [
    (1,  1),   # Urban Fresh Foods  -> New York
    (2,  2),   # CityRide Mobility   -> Los Angeles
    (3,  3),   # SkyDrop Deliveries  -> Chicago
    (4,  4),   # GreenWheel Scooters -> Houston
    (5,  5),   # Cafe Bonjour        -> Miami
    (16, 6),   # FreshMart Supermarkets -> Toronto
    (17, 7),   # GoClean Energy         -> Vancouver
    (18, 8),   # Metro Electronics       -> Montreal
    (19, 9),   # VeloCity Bikes          -> Ottawa
    (20, 10),  # HappyPets Store         -> Calgary
]


CATALOG_ITEMS_COLUMNS = ("merchant_id", "sku", "name", "weight_kg", "length_cm", "width_cm", "height_cm", "hazard_class")
CATALOG_ITEMS = [

    (1,  'UFF-APL-1KG', 'Apples 1kg Pack',   1.00, 25.0, 20.0, 10.0, 'None'),
    (1,  'UFF-MLK-1L',  'Organic Milk 1L',   1.05, 8.0,  8.0,  25.0, 'Fragile'),
    (1,  'UFF-BRD-800', 'Wholegrain Bread',  0.80, 30.0, 12.0, 10.0, 'None'),

    (2,  'CRM-BATT-48V', '48V Scooter Battery', 6.20, 30.0, 15.0, 10.0, 'Battery'),
    (2,  'CRM-TIRE-10',  '10 Inch Street Tire', 1.10, 26.0, 26.0, 8.0,  'None'),
    (2,  'CRM-BRKPAD',   'Disc Brake Pads',     0.20, 10.0, 8.0,  2.0,  'None'),

    (3,  'SDD-PROP-9IN', '9 Inch Carbon Props', 0.15, 25.0, 5.0, 3.0,  'None'),
    (3,  'SDD-CTRL-UNI', 'Universal Flight Ctrl',0.60, 12.0, 10.0, 4.0, 'Fragile'),
    (3,  'SDD-BATT-6S',  '6S LiPo Battery 10Ah', 1.25, 18.0, 8.0,  7.0, 'Battery'),

    (4,  'GWS-HELM-M',  'Safety Helmet M',  0.45, 25.0, 22.0, 20.0, 'None'),
    (4,  'GWS-LOCK-U',  'U-Lock Hardened',  1.30, 20.0, 15.0, 3.0,  'None'),
    (4,  'GWS-LIGHT-R', 'Rear LED Light',   0.10, 8.0,  4.0,  3.0,  'None'),

    (5,  'CB-CFE-500', 'Roasted Coffee 500g', 0.50, 12.0, 8.0,  20.0, 'None'),
    (5,  'CB-MUG-STD', 'Ceramic Mug',         0.30, 10.0, 10.0, 10.0, 'Fragile'),
    (5,  'CB-TEA-50',  'Herbal Tea 50 Bags',  0.25, 15.0, 10.0, 5.0,  'None'),

    (6,  'FMS-RICE-5',  'Basmati Rice 5kg',   5.00, 40.0, 30.0, 12.0, 'None'),
    (6,  'FMS-OIL-1L',  'Canola Oil 1L',      0.95, 8.0,  8.0,  25.0, 'Fragile'),
    (6,  'FMS-SALT-1',  'Iodized Salt 1kg',   1.00, 15.0, 10.0, 4.0,  'None'),

    (7,  'GCE-CHG-500W', '500W Smart Charger', 1.80, 22.0, 14.0, 8.0,  'None'),
    (7,  'GCE-BATT-52V', '52V Pack 14Ah',      3.50, 28.0, 12.0, 9.0,  'Battery'),
    (7,  'GCE-CBL-FAST', 'Fast Charge Cable',  0.20, 18.0, 8.0,  3.0,  'None'),

    (8,  'ME-PWRBANK', 'Power Bank 20k mAh', 0.45, 15.0, 7.0, 2.0,  'Battery'),
    (8,  'ME-CAM-ACT', 'Action Camera 4K',   0.35, 10.0, 6.0, 4.0,  'Fragile'),
    (8,  'ME-MEM-128', 'MicroSD 128GB',      0.02, 2.0,  2.0,  0.3, 'None'),

    (9,  'VCB-TUBE-700', '700c Inner Tube', 0.20, 12.0, 10.0, 3.0,  'None'),
    (9,  'VCB-CHAIN-11', '11-Speed Chain',  0.30, 25.0, 10.0, 3.0,  'None'),
    (9,  'VCB-LUBE-50',  'Chain Lube 50ml', 0.10, 8.0,  3.0,  3.0,  'None'),

    (10, 'HPS-FOOD-2', 'Dry Pet Food 2kg',   2.00, 30.0, 20.0, 12.0, 'None'),
    (10, 'HPS-TOY-BL', 'Rubber Ball Toy',    0.15, 8.0,  8.0,  8.0,  'None'),
    (10, 'HPS-BOWL-S', 'Stainless Bowl S',   0.25, 15.0, 15.0, 6.0,  'None'),
]


CUSTOMERS_COLUMNS = ("person_id", "organization_id", "default_currency")
CUSTOMERS = [
    # Person customers (120)
    (1,  None, 'USD'),
    (2,  None, 'USD'),
    (3,  None, 'USD'),
    (4,  None, 'USD'),
    (5,  None, 'USD'),
    (6,  None, 'CAD'),
    (7,  None, 'CAD'),
    (8,  None, 'CAD'),
    (9,  None, 'CAD'),
    (10, None, 'CAD'),
    (11, None, 'GBP'),
    (12, None, 'GBP'),
    (13, None, 'GBP'),
    (14, None, 'GBP'),
    (15, None, 'GBP'),
    (16, None, 'EUR'),
    (17, None, 'EUR'),
    (18, None, 'EUR'),
    (19, None, 'EUR'),
    (20, None, 'EUR'),
    # Organization customers
    (None, 1,  'USD'),
    (None, 2,  'USD'),
    (None, 3,  'USD'),
    (None, 4,  'USD'),
    (None, 5,  'USD'),
    (None, 16, 'CAD'),
    (None, 17, 'CAD'),
    (None, 18, 'CAD'),
    (None, 19, 'CAD'),
    (None, 20, 'CAD'),
]


INVOICES_COLUMNS = ("customer_id", "invoice_number", "status", "currency", "issue_date", "due_date")
INVOICES = [
    (1,  'INV-0001', 'Paid', 'USD', '2025-09-01', '2025-09-08'),
    (2,  'INV-0002', 'Paid', 'USD', '2025-09-02', '2025-09-09'),
    (3,  'INV-0003', 'Paid', 'USD', '2025-09-03', '2025-09-10'),
    (4,  'INV-0004', 'Open', 'USD', '2025-09-04', '2025-09-11'),
    (5,  'INV-0005', 'Open', 'USD', '2025-09-05', '2025-09-12'),

    (6,  'INV-0006', 'Paid', 'CAD', '2025-09-01', '2025-09-15'),
    (7,  'INV-0007', 'Paid', 'CAD', '2025-09-02', '2025-09-16'),
    (8,  'INV-0008', 'Open', 'CAD', '2025-09-03', '2025-09-17'),
    (9,  'INV-0009', 'Paid', 'CAD', '2025-09-04', '2025-09-18'),
    (10, 'INV-0010', 'Open', 'CAD', '2025-09-05', '2025-09-19'),

    (11, 'INV-0011', 'Paid',   'GBP', '2025-09-06', '2025-09-13'),
    (12, 'INV-0012', 'Open',   'GBP', '2025-09-07', '2025-09-14'),
    (13, 'INV-0013', 'Paid',   'GBP', '2025-09-08', '2025-09-15'),
    (14, 'INV-0014', 'Open',   'GBP', '2025-09-09', '2025-09-16'),
    (15, 'INV-0015', 'Paid',   'GBP', '2025-09-10', '2025-09-17'),

    (16, 'INV-0016', 'Paid',   'EUR', '2025-09-01', '2025-09-08'),
    (17, 'INV-0017', 'Open',   'EUR', '2025-09-02', '2025-09-09'),
    (18, 'INV-0018', 'Paid',   'EUR', '2025-09-03', '2025-09-10'),
    (19, 'INV-0019', 'Open',   'EUR', '2025-09-04', '2025-09-11'),
    (20, 'INV-0020', 'Paid', 'EUR', '2025-09-05', '2025-09-12'),
]


INVOICE_LINES_COLUMNS = ("invoice_id", "description", "quantity", "unit_price", "tax_rate_pct")
INVOICE_LINES = [
    (1,  'Base delivery fee', 1, 100.00, 8.50),
    (3,  'Base delivery fee', 1, 100.00, 8.50),
    (3,  'Base delivery fee', 1, 100.00, 8.50),
    (4,  'Base delivery fee', 1, 100.00, 8.50),
    (5,  'Base delivery fee', 1, 100.00, 8.50),

    (4,  'Base delivery fee', 1, 120.00, 13.00),
    (4,  'Base delivery fee', 1, 120.00, 13.00),
    (3,  'Base delivery fee', 1, 120.00, 13.00),
    (3,  'Base delivery fee', 1, 120.00, 13.00),
    (2, 'Base delivery fee', 1, 120.00, 13.00),

    (11, 'Base delivery fee', 1, 80.00, 20.00),
    (12, 'Base delivery fee', 1, 80.00, 20.00),
    (13, 'Base delivery fee', 1, 80.00, 20.00),
    (14, 'Base delivery fee', 1, 80.00, 20.00),
    (15, 'Base delivery fee', 1, 80.00, 20.00),

    (16, 'Base delivery fee', 1, 90.00, 21.00),
    (17, 'Base delivery fee', 1, 90.00, 21.00),
    (18, 'Base delivery fee', 1, 90.00, 21.00),
    (19, 'Base delivery fee', 1, 90.00, 21.00),
]


PAYMENTS_COLUMNS = ("invoice_id", "amount", "method", "reference")
PAYMENTS = [
    (1,  108.50, 'Card',   'TXN-USD-0001'),
    (2,  215.00, 'Wallet', 'TXN-USD-0002'),
    (3,  150.75, 'Wire',   'TXN-USD-0003'),
    (4,  99.99,  'Cash',   'TXN-USD-0004'),
    (5,  120.00, 'Card',   'TXN-USD-0005'),

    (6,  135.60, 'Wallet', 'TXN-CAD-0006'),
    (7,  200.00, 'Wire',   'TXN-CAD-0007'),
    (8,  145.25, 'Cash',   'TXN-CAD-0008'),
    (9,  310.00, 'Card',   'TXN-CAD-0009'),
    (10,  89.99, 'Wallet', 'TXN-CAD-0010'),

    (11, 96.00,  'Wire',   'TXN-GBP-0011'),
    (12, 75.50,  'Cash',   'TXN-GBP-0012'),
    (13, 180.40, 'Card',   'TXN-GBP-0013'),
    (14, 200.00, 'Wallet', 'TXN-GBP-0014'),
    (15,  99.95, 'Wire',   'TXN-GBP-0015'),

    (16, 108.90, 'Cash',   'TXN-EUR-0016'),
    (17, 220.00, 'Card',   'TXN-EUR-0017'),
    (18, 145.75, 'Wallet', 'TXN-EUR-0018'),
    (19, 300.00, 'Wire',   'TXN-EUR-0019'),
    (20,  85.20, 'Cash',   'TXN-EUR-0020'),
]


ORDERS_COLUMNS = ("merchant_id", "customer_id", "city_id", "pickup_address_id", "dropoff_address_id", "status", "notes")
ORDERS = [
    (1,  1,  1,  1,  11, 'Pending',   'Order 1'),
    (2,  2,  2,  2,  12, 'Assigned',  'Order 2'),
    (3,  3,  3,  3,  13, 'InTransit', 'Order 3'),
    (4,  4,  4,  4,  14, 'Delivered', 'Order 4'),
    (5,  5,  5,  5,  15, 'Pending',   'Order 5'),
    (6,  6,  6,  6,  16, 'Assigned',  'Order 6'),
    (7,  7,  7,  7,  17, 'InTransit', 'Order 7'),
    (8,  8,  8,  8,  18, 'Delivered', 'Order 8'),
    (9,  9,  9,  9,  19, 'Pending',   'Order 9'),
    (10, 10, 10, 10, 20, 'Assigned',  'Order 10'),
    (1,  11, 11, 11, 21, 'InTransit', 'Order 11'),
    (2,  12, 12, 12, 22, 'Delivered', 'Order 12'),
    (3,  13, 13, 13, 23, 'Pending',   'Order 13'),
    (4,  14, 14, 14, 24, 'Assigned',  'Order 14'),
    (5,  15, 15, 15, 25, 'InTransit', 'Order 15'),
    (6,  16, 16, 16, 26, 'Delivered', 'Order 16'),
    (7,  17, 17, 17, 27, 'Pending',   'Order 17'),
    (8,  18, 18, 18, 28, 'Assigned',  'Order 18'),
    (9,  19, 19, 19, 29, 'InTransit', 'Order 19'),
    (10, 20, 20, 20, 30, 'Delivered', 'Order 20'),
]


ORDER_ITEMS_COLUMNS = ("order_id", "catalog_item_id", "quantity", "declared_value")
ORDER_ITEMS = [
    (1, 1,  1,  25.00),
    (2, 2,  2,  60.00),
    (3, 3,  1,  35.00),
    (4, 4,  1, 120.00),
    (5, 5,  3,  45.00),
    (6, 6,  1, 135.60),
    (7, 7,  2, 200.00),
    (8, 8,  1, 145.25),
    (9, 9,  1, 310.00),
    (10,10, 1,  89.99),
    (11,11, 1,  96.00),
    (12,12, 2, 150.00),
    (13,13, 1, 180.40),
    (14,14, 1, 200.00),
    (15,15, 1,  99.95),
    (16,16, 1, 108.90),
    (17,17, 2, 220.00),
    (18,18, 1, 145.75),
    (19,19, 1, 300.00),
    (20,20, 1,  85.20),
]


PACKAGES_COLUMNS = ("order_id", "label_code", "weight_kg", "hazard_class")
PACKAGES = [
    (1,  'PKG-0001',  1.200, 'None'),
    (2,  'PKG-0002',  2.500, 'None'),
    (3,  'PKG-0003',  0.800, 'Fragile'),
    (4,  'PKG-0004',  6.200, 'Battery'),
    (5,  'PKG-0005',  1.000, 'None'),
    (6,  'PKG-0006',  5.000, 'None'),
    (7,  'PKG-0007',  3.500, 'Battery'),
    (8,  'PKG-0008',  0.450, 'Fragile'),
    (9,  'PKG-0009',  2.000, 'None'),
    (10, 'PKG-0010',  0.300, 'None'),
    (11, 'PKG-0011',  0.900, 'None'),
    (12, 'PKG-0012',  1.800, 'None'),
    (13, 'PKG-0013',  0.350, 'Fragile'),
    (14, 'PKG-0014',  1.300, 'None'),
    (15, 'PKG-0015',  2.200, 'None'),
    (16, 'PKG-0016',  0.500, 'None'),
    (17, 'PKG-0017',  3.800, 'None'),
    (18, 'PKG-0018',  1.250, 'None'),
    (19, 'PKG-0019',  2.750, 'None'),
    (20, 'PKG-0020',  0.950, 'None'),
]


ROUTES_COLUMNS = ("city_id", "vehicle_id", "planned_start_at", "planned_end_at", "status")
ROUTES = [
    (1,  1,  1, 2, 'Planned'),
    (2,  2,  2, 3, 'Planned'),
    (3,  3,  3, 4, 'Planned'),
    (4,  4,  4, 5, 'Planned'),
    (5,  5,  5, 6, 'Planned'),
    (6,  6,  6, 7, 'Live'),
    (7,  7,  7, 8, 'Live'),
    (8,  8,  8, 9, 'Live'),
    (9,  9,  9, 10, 'Live'),
    (10, 10, 10, 11, 'Live'),
    (11, 11, 11, 12, 'Completed'),
    (12, 12, 12, 13, 'Completed'),
    (13, 13, 13, 14, 'Completed'),
    (14, 14, 14, 15, 'Completed'),
    (15, 15, 15, 16, 'Completed'),
    (16, 16, 16, 17, 'Aborted'),
    (17, 17, 17, 18, 'Aborted'),
    (18, 18, 18, 19, 'Aborted'),
    (19, 19, 19, 20, 'Aborted'),
    (20, 20, 20, 21, 'Aborted'),
]


ROUTE_STOPS_COLUMNS = ("route_id", "sequence_nr", "address_id", "purpose", "eta_at", "etf_at")
ROUTE_STOPS = [
    (1,  1, 1,  'Pickup',  None, None),
    (2,  1, 2,  'Pickup',  None, None),
    (3,  1, 3,  'Pickup',  None, None),
    (4,  1, 4,  'Pickup',  None, None),
    (5,  1, 5,  'Pickup',  None, None),
    (6,  1, 6,  'Pickup',  None, None),
    (7,  1, 7,  'Pickup',  None, None),
    (8,  1, 8,  'Pickup',  None, None),
    (9,  1, 9,  'Pickup',  None, None),
    (10, 1, 10, 'Pickup',  None, None),
    (11, 1, 11, 'Pickup',  None, None),
    (12, 1, 12, 'Pickup',  None, None),
    (13, 1, 13, 'Pickup',  None, None),
    (14, 1, 14, 'Pickup',  None, None),
    (15, 1, 15, 'Pickup',  None, None),
    (16, 1, 16, 'Pickup',  None, None),
    (17, 1, 17, 'Pickup',  None, None),
    (18, 1, 18, 'Pickup',  None, None),
    (19, 1, 19, 'Pickup',  None, None),
    (20, 1, 20, 'Pickup',  None, None),
]


ASSIGNMENTS_COLUMNS = ("route_stop_id", "order_id", "package_id")
ASSIGNMENTS = [
    (1,  1,  1),
    (2,  2,  2),
    (3,  3,  3),
    (4,  4,  4),
    (5,  5,  5),
    (6,  6,  6),
    (7,  7,  7),
    (8,  8,  8),
    (9,  9,  9),
    (10, 10, 10),
    (11, 11, 11),
    (12, 12, 12),
    (13, 13, 13),
    (14, 14, 14),
    (15, 15, 15),
    (16, 16, 16),
    (17, 17, 17),
    (18, 18, 18),
    (19, 19, 19),
    (20, 20, 20),
]


PROOFS_OF_DELIVERY_COLUMNS = ("order_id", "captured_by_user_id", "method", "artifact_url")
PROOFS_OF_DELIVERY = [
    (1,  1,  'Signature', 'https://files/pod1'),
    (2,  2,  'Photo',     'https://files/pod2'),
    (3,  3,  'Pin',       'https://files/pod3'),
    (4,  4,  'Signature', 'https://files/pod4'),
    (5,  5,  'Photo',     'https://files/pod5'),
    (6,  6,  'Pin',       'https://files/pod6'),
    (7,  7,  'Signature', 'https://files/pod7'),
    (8,  8,  'Photo',     'https://files/pod8'),
    (9,  9,  'Pin',       'https://files/pod9'),
    (10, 10, 'Signature', 'https://files/pod10'),
    (11, 11, 'Photo',     'https://files/pod11'),
    (12, 12, 'Pin',       'https://files/pod12'),
    (13, 13, 'Signature', 'https://files/pod13'),
    (14, 14, 'Photo',     'https://files/pod14'),
    (15, 15, 'Pin',       'https://files/pod15'),
    (16, 16, 'Signature', 'https://files/pod16'),
    (17, 17, 'Photo',     'https://files/pod17'),
    (18, 18, 'Pin',       'https://files/pod18'),
    (19, 19, 'Signature', 'https://files/pod19'),
    (20, 20, 'Photo',     'https://files/pod20'),
]


EVENTS_COLUMNS = ("event_type", "actor_user_id", "entity_type", "entity_id_big", "city_id", "payload_json")
EVENTS = [
    ('Order.Created',   1,  'Order', 1,  1,  '{"source":"api"}'),
    ('Order.Assigned',  2,  'Order', 2,  2,  '{"vehicle":5}'),
    ('Order.InTransit', 3,  'Order', 3,  3,  '{"eta_min":20}'),
    ('Order.Delivered', 4,  'Order', 4,  4,  '{"proof":"signature"}'),
    ('Order.Created',   5,  'Order', 5,  5,  '{}'),
    ('Route.Live',      6,  'Route', 1,  6,  '{"segments":10}'),
    ('Route.Live',      7,  'Route', 2,  7,  '{"segments":8}'),
    ('Route.Completed', 8,  'Route', 3,  8,  '{}'),
    ('Route.Completed', 9,  'Route', 4,  9,  '{}'),
    ('Route.Aborted',   10, 'Route', 5,  10, '{"reason":"weather"}'),
    ('Order.Created',   1,  'Order', 6,  11, '{}'),
    ('Order.Assigned',  2,  'Order', 7,  12, '{}'),
    ('Order.InTransit', 3,  'Order', 8,  13, '{}'),
    ('Order.Delivered', 4,  'Order', 9,  14, '{}'),
    ('Order.Created',   5,  'Order', 10, 15, '{}'),
    ('Order.Created',   6,  'Order', 11, 16, '{}'),
    ('Order.Created',   7,  'Order', 12, 17, '{}'),
    ('Order.Created',   8,  'Order', 13, 18, '{}'),
    ('Order.Created',   9,  'Order', 14, 19, '{}'),
    ('Order.Created',   10, 'Order', 15, 20, '{}'),
]


TICKETS_COLUMNS = ("opened_by_user_id", "related_order_id", "status", "priority", "subject")
TICKETS = [
    (1,  1,  'Open',     'High',   'Delay reported'),
    (2,  2,  'Pending',  'Medium', 'Address clarification'),
    (3,  None, 'Open',   'Low',    'Billing question'),
    (4,  4,  'Resolved', 'High',   'Missing item'),
    (5,  None, 'Open',   'Urgent', 'Damaged package'),
    (6,  6,  'Pending',  'Low',    'ETA request'),
    (7,  7,  'Open',     'High',   'Rider behavior'),
    (8,  None, 'Open',   'Medium', 'Change dropoff time'),
    (9,  9,  'Pending',  'Low',    'Wrong label'),
    (10, 10, 'Closed',   'Low',    'Feedback'),
    (11, 11, 'Open',     'High',   'Route issue'),
    (12, None, 'Pending','Medium', 'Invoice copy'),
    (13, 13, 'Open',     'Low',    'Lost item'),
    (14, 14, 'Resolved', 'High',   'Late delivery'),
    (15, None, 'Open',   'Urgent', 'Hazard handling'),
    (16, 16, 'Pending',  'Low',    'Proof-of-delivery'),
    (17, 17, 'Open',     'Medium', 'Custom instruction'),
    (18, None, 'Open',   'Low',    'Change contact'),
    (19, 19, 'Pending',  'Medium', 'Hold request'),
    (20, 20, 'Closed',   'Low',    'General inquiry'),
]


TICKET_MESSAGES_COLUMNS = ("ticket_id", "sender_user_id", "body")
TICKET_MESSAGES = [
    (1,  1,  'We are checking with the courier.'),
    (2,  2,  'Please confirm apartment number.'),
    (3,  3,  'Billing team will follow up.'),
    (4,  4,  'Replacement initiated.'),
    (5,  5,  'Please share photos of the damage.'),
    (6,  6,  'ETA updated to 30 minutes.'),
    (7,  7,  'Thanks for reporting; coaching scheduled.'),
    (8,  8,  'Dropoff time updated.'),
    (9,  9,  'Label reprinted and attached.'),
    (10, 10, 'Thanks for the feedback!'),
    (11, 11, 'Route recalculated.'),
    (12, 12, 'Invoice PDF emailed.'),
    (13, 13, 'Search in progress.'),
    (14, 14, 'Credit applied.'),
    (15, 15, 'Hazard SOP shared.'),
    (16, 16, 'POD attached.'),
    (17, 17, 'Noted, instructions added.'),
    (18, 18, 'Contact updated.'),
    (19, 19, 'Order put on hold.'),
    (20, 20, 'Case closed.'),
]


CHANGE_LOG_COLUMNS = ("table_name", "primary_key_json", "operation", "changed_by_user_id", "snapshot_json")
CHANGE_LOG = [
    ('Orders',        '{"OrderId":1}',  'INSERT', 1,  '{}'),
    ('Orders',        '{"OrderId":2}',  'INSERT', 2,  '{}'),
    ('OrderItems',    '{"OrderItemId":1}', 'INSERT', 3,  '{}'),
    ('Packages',      '{"PackageId":1}', 'INSERT', 4,  '{}'),
    ('Routes',        '{"RouteId":1}',  'INSERT', 5,  '{}'),
    ('RouteStops',    '{"RouteStopId":1}', 'INSERT', 6,  '{}'),
    ('Assignments',   '{"AssignmentId":1}', 'INSERT', 7,  '{}'),
    ('ProofsOfDelivery', '{"PodId":1}', 'INSERT', 8,  '{}'),
    ('Events',        '{"EventId":1}',  'INSERT', 9,  '{}'),
    ('Tickets',       '{"TicketId":1}', 'INSERT', 10, '{}'),
    ('TicketMessages','{"TicketMessageId":1}', 'INSERT', 1,  '{}'),
    ('Orders',        '{"OrderId":3}',  'UPDATE', 2,  '{}'),
    ('Routes',        '{"RouteId":2}',  'UPDATE', 3,  '{}'),
    ('Packages',      '{"PackageId":2}', 'UPDATE', 4,  '{}'),
    ('Orders',        '{"OrderId":4}',  'DELETE', 5,  '{}'),
    ('Events',        '{"EventId":2}',  'INSERT', 6,  '{}'),
    ('Tickets',       '{"TicketId":2}', 'UPDATE', 7,  '{}'),
    ('TicketMessages','{"TicketMessageId":2}', 'INSERT', 8,  '{}'),
    ('Assignments',   '{"AssignmentId":2}', 'UPDATE', 9,  '{}'),
    ('ProofsOfDelivery', '{"PodId":2}', 'INSERT', 10, '{}'),
]
