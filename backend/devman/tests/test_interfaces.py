"""Tests for interface endpoints."""


def test_interface_crud(client, test_device):
    response = client.post(
        "/interfaces",
        json={"dev_id": test_device.dev_id, "ifindex": 3, "descr": "Gi0/3", "mac": "00-11-22-33-44-55"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["mac"] == "00:11:22:33:44:55"

    response = client.put(f"/interfaces/{data['if_id']}", json={"alias": "uplink", "speed": 1000})
    assert response.status_code == 200
    assert response.json()["alias"] == "uplink"

    assert client.delete(f"/interfaces/{data['if_id']}").status_code == 204
    assert client.get(f"/interfaces/{data['if_id']}").status_code == 404


def test_interface_malformed_mac_not_set(client, test_device):
    response = client.post(
        "/interfaces", json={"dev_id": test_device.dev_id, "descr": "Gi0/1", "mac": "nope"}
    )
    assert response.status_code == 201
    assert response.json()["mac"] is None


def test_interface_filters(client, test_device):
    for ifindex, speed, mac in ((1, 100, "00:00:00:00:00:01"), (12, 1000, None), (13, 10000, None)):
        client.post(
            "/interfaces",
            json={"dev_id": test_device.dev_id, "ifindex": ifindex, "descr": f"if{ifindex}", "speed": speed, "mac": mac},
        )

    def descrs(params):
        return [item["descr"] for item in client.get("/interfaces", params=params).json()]

    assert descrs({"ifindex_f": "1%"}) == ["if1", "if12", "if13"]
    assert descrs({"ifindex_f": "1_"}) == ["if12", "if13"]
    assert descrs({"speed_ge": "1000"}) == ["if12", "if13"]
    assert descrs({"speed_ge": "fast"}) == ["if1", "if12", "if13"]
    assert descrs({"dev_id_f": "99999999999999999999999"}) == ["if1", "if12", "if13"]
    assert descrs({"speed_le": "-99999999999999999999999"}) == ["if1", "if12", "if13"]
    assert descrs({"mac_f": "0000.0000.0001"}) == ["if1"]
    assert descrs({"limit": "1", "offset": "2"}) == ["if13"]


def test_ip_interfaces(client, test_device):
    response = client.post(
        "/ip_interfaces",
        json={"dev_id": test_device.dev_id, "ifindex": 1, "ip_addr": "10.20.30.40/24"},
    )
    assert response.status_code == 201
    assert response.json()["ip_addr"] == "10.20.30.0/24"

    client.post("/ip_interfaces", json={"dev_id": test_device.dev_id, "ip_addr": "fe80::1"})

    listed = client.get("/ip_interfaces", params={"ip_addr_f": "10.20.0.0/16"}).json()
    assert [item["ip_addr"] for item in listed] == ["10.20.30.0/24"]
    assert client.get("/ip_interfaces/count").json() == {"count": 2}


def test_archived_interfaces(client):
    response = client.post(
        "/archived/interfaces",
        json={"hostname": "gone-1", "host_ip4": "192.0.2.1", "descr": "Gi0/1", "mac": "aa:bb:cc:00:00:01"},
    )
    assert response.status_code == 201
    ifa_id = response.json()["ifa_id"]
    assert response.json()["host_ip4"] == "192.0.2.1/32"

    listed = client.get("/archived/interfaces", params={"hostname_f": "GONE%"}).json()
    assert [item["ifa_id"] for item in listed] == [ifa_id]

    assert client.get(f"/archived/interfaces/{ifa_id}").status_code == 200
    assert client.delete(f"/archived/interfaces/{ifa_id}").status_code == 204
